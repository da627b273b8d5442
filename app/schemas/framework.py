# brief_prioritization_project/app/schemas/framework.py

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.services.prioritization import (
    FieldSpec,
    Framework,
    FrameworkKind,
    ScaleFramework,
    ScaleOption,
)


class FrameworkRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: str
    name: str
    description: str
    kind: FrameworkKind
    values: Optional[List[ScaleOption]] = None
    fields: Optional[List[FieldSpec]] = None
    is_default: bool = False

    @classmethod
    def from_framework(cls, fw: Framework, default_id: Optional[str] = None) -> "FrameworkRead":
        if isinstance(fw, ScaleFramework):
            return cls(
                id=fw.id,
                name=fw.name,
                description=fw.description,
                kind=fw.kind,
                values=list(fw.values),
                is_default=fw.id == default_id,
            )
        return cls(
            id=fw.id,
            name=fw.name,
            description=fw.description,
            kind=fw.kind,
            fields=list(fw.fields),
            is_default=fw.id == default_id,
        )
