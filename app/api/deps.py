from __future__ import annotations

import os
from typing import Generator

from fastapi import Header, HTTPException
from sqlalchemy.orm import Session

from app.db.session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def require_shared_secret(x_brief_review_secret: str | None = Header(default=None)) -> None:
    """
    v1 security: shared secret header from the review UI backend.
    Header name: X-BRIEF-REVIEW-SECRET
    """
    expected = os.getenv("BRIEF_REVIEW_SECRET", "")
    if not expected:
        # If secret isn't configured, fail closed (recommended).
        raise HTTPException(status_code=500, detail="BRIEF_REVIEW_SECRET is not configured")

    if not x_brief_review_secret or x_brief_review_secret != expected:
        raise HTTPException(status_code=401, detail="Unauthorized")
