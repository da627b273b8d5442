# brief_prioritization_project/app/services/prioritization/engines/rice.py

from __future__ import annotations

from typing import Any, Mapping

from app.services.prioritization.interfaces import PriorityLabel, ScoreBucket
from app.services.prioritization.utils import bucket_score, numeric_or, round_half_up


class RiceScoringEngine:
    """RICE scoring engine.

    RICE formula: (Reach * Impact * Confidence%) / Effort, rounded to 2 decimals
    - Reach: people/month (default 1)
    - Impact: multiplier 0.25-3 (default 1)
    - Confidence: percentage 10-100 (default 100)
    - Effort: person-weeks (default 1); validation rejects effort < 1
    """

    buckets = (
        ScoreBucket(1000, "Critical", "#dc2626"),
        ScoreBucket(300, "High", "#d97706"),
        ScoreBucket(100, "Medium", "#059669"),
        ScoreBucket(30, "Low", "#2563eb"),
    )
    fallback = PriorityLabel(label="Backlog", color="#6b7280")

    def compute(self, values: Mapping[str, Any]) -> float:
        reach = numeric_or(values, "reach", 1)
        impact = numeric_or(values, "impact", 1)
        confidence = numeric_or(values, "confidence", 100) / 100
        effort = numeric_or(values, "effort", 1)
        return round_half_up((reach * impact * confidence) / effort, 2)

    def label_for(self, score: float) -> PriorityLabel:
        return bucket_score(score, self.buckets, self.fallback)


__all__ = ["RiceScoringEngine"]
