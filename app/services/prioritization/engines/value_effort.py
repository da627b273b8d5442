# brief_prioritization_project/app/services/prioritization/engines/value_effort.py

from __future__ import annotations

from typing import Any, Mapping

from app.services.prioritization.interfaces import Quadrant
from app.services.prioritization.utils import numeric_or

QUICK_WINS = Quadrant(label="Quick Wins", color="#059669", rank=1)
MAJOR_PROJECTS = Quadrant(label="Major Projects", color="#d97706", rank=2)
FILL_INS = Quadrant(label="Fill-ins", color="#2563eb", rank=3)
THANKLESS_TASKS = Quadrant(label="Thankless Tasks", color="#6b7280", rank=4)
EVALUATE = Quadrant(label="Evaluate", color="#059669", rank=2)


class ValueEffortMatrixEngine:
    """Value vs Effort matrix.

    Classifies (value, effort), both on a 1-10 scale, into a quadrant.
    Rules are checked in order; anything in the 5-6 band on either axis,
    or an asymmetric pair such as value=8/effort=5, lands in Evaluate.
    A missing axis counts as 5.
    """

    quadrants = (QUICK_WINS, MAJOR_PROJECTS, FILL_INS, THANKLESS_TASKS, EVALUATE)

    def classify(self, values: Mapping[str, Any]) -> Quadrant:
        value = numeric_or(values, "value", 5)
        effort = numeric_or(values, "effort", 5)

        if value >= 7 and effort <= 4:
            return QUICK_WINS
        if value >= 7 and effort >= 7:
            return MAJOR_PROJECTS
        if value <= 4 and effort <= 4:
            return FILL_INS
        if value <= 4 and effort >= 7:
            return THANKLESS_TASKS
        return EVALUATE


__all__ = [
    "ValueEffortMatrixEngine",
    "QUICK_WINS",
    "MAJOR_PROJECTS",
    "FILL_INS",
    "THANKLESS_TASKS",
    "EVALUATE",
]
