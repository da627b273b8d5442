# app/db/models/__init__.py

from .organization import Organization
from .brief import ProjectBrief

__all__ = [
    "Organization",
    "ProjectBrief",
]
