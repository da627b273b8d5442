# brief_prioritization_project/app/db/models/organization.py

from __future__ import annotations

from sqlalchemy import JSON, Column, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base


class Organization(Base):
    """Tenant. Prioritization settings live in document_settings and are only read here."""

    __tablename__ = "organizations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    # e.g. {"prioritization_framework": "ice", "enabled_prioritization_frameworks": ["simple", "ice"]}
    document_settings = Column(JSON, nullable=True)

    briefs = relationship("ProjectBrief", back_populates="organization")
