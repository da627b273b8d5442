from .framework import FrameworkRead
from .brief import BriefPriorityRead

__all__ = [
	"FrameworkRead",
	"BriefPriorityRead",
]
