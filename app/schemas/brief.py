# brief_prioritization_project/app/schemas/brief.py

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.services.prioritization import PriorityDisplay


class BriefPriorityRead(BaseModel):
    """Stored priority of a brief plus its display, recomputed at read time."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)

    brief_id: int
    org_id: int
    title: str
    review_status: str
    framework_id: str = "simple"
    priority_data: Optional[Dict[str, Any]] = None
    priority: Optional[int] = None
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    display: Optional[PriorityDisplay] = None
