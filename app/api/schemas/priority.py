# brief_prioritization_project/app/api/schemas/priority.py

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.schemas.framework import FrameworkRead
from app.services.prioritization import PriorityDisplay


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class FrameworkCatalogResponse(_ApiModel):
    frameworks: List[FrameworkRead]


class OrgFrameworksResponse(_ApiModel):
    org_id: int
    default_framework_id: str
    enabled_framework_ids: List[str]
    frameworks: List[FrameworkRead]


class BriefReviewRequest(_ApiModel):
    priority_data: Optional[Dict[str, Any]] = None
    framework_id: Optional[str] = Field(default=None, max_length=50)
    # Legacy 1-5 clients
    priority: Optional[int] = None
    reviewed_by: Optional[str] = Field(default=None, max_length=255)


class PriorityPreviewRequest(_ApiModel):
    framework_id: Optional[str] = None
    values: Dict[str, Any] = Field(default_factory=dict)


class PriorityPreviewResponse(_ApiModel):
    framework_id: str
    score: Optional[Any] = None
    display: PriorityDisplay
    errors: List[str] = Field(default_factory=list)
    is_valid: bool
