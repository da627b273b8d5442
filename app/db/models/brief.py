# brief_prioritization_project/app/db/models/brief.py

from __future__ import annotations

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.base import Base


class ProjectBrief(Base):
    __tablename__ = "project_briefs"

    id = Column(Integer, primary_key=True, index=True)
    org_id = Column(Integer, ForeignKey("organizations.id"), index=True, nullable=False)

    title = Column(String(255), nullable=False)
    summary_md = Column(Text, nullable=True)

    # Review
    review_status = Column(String(20), index=True, nullable=False, default="pending")
    reviewed_at = Column(DateTime(timezone=True), nullable=True)
    reviewed_by = Column(String(255), nullable=True)

    # Priority: priority_data is only meaningful together with framework_id
    priority_data = Column(JSON, nullable=True)
    framework_id = Column(String(50), index=True, nullable=False, default="simple")
    # Legacy 1-5 rank derived from priority_data, used for sorting across frameworks
    priority = Column(Integer, nullable=True)

    organization = relationship("Organization", back_populates="briefs")
