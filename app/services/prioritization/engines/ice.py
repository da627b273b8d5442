# brief_prioritization_project/app/services/prioritization/engines/ice.py

from __future__ import annotations

from typing import Any, Mapping

from app.services.prioritization.interfaces import PriorityLabel, ScoreBucket
from app.services.prioritization.utils import bucket_score, numeric_or


class IceScoringEngine:
    """ICE scoring engine.

    ICE formula: Impact * Confidence * Ease
    - Each factor is entered on a 1-10 scale, so the score spans 1-1000.
    - A missing factor counts as 1.
    """

    buckets = (
        ScoreBucket(800, "Critical", "#dc2626"),
        ScoreBucket(500, "High", "#d97706"),
        ScoreBucket(200, "Medium", "#059669"),
        ScoreBucket(50, "Low", "#2563eb"),
    )
    fallback = PriorityLabel(label="Backlog", color="#6b7280")

    def compute(self, values: Mapping[str, Any]) -> float:
        impact = numeric_or(values, "impact", 1)
        confidence = numeric_or(values, "confidence", 1)
        ease = numeric_or(values, "ease", 1)
        return impact * confidence * ease

    def label_for(self, score: float) -> PriorityLabel:
        return bucket_score(score, self.buckets, self.fallback)


__all__ = ["IceScoringEngine"]
