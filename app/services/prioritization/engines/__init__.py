# brief_prioritization_project/app/services/prioritization/engines/__init__.py

from .ice import IceScoringEngine
from .rice import RiceScoringEngine
from .value_effort import ValueEffortMatrixEngine

__all__ = ["IceScoringEngine", "RiceScoringEngine", "ValueEffortMatrixEngine"]
