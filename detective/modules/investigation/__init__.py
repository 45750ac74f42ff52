from .planner import QueryPlanner
from .fetcher import EvidenceFetcher
from .analyzer import VerdictAnalyzer
from .demo import build_demo_response, is_demo_subject
from .result_adapter import to_investigation_result

__all__ = [
    "QueryPlanner",
    "EvidenceFetcher",
    "VerdictAnalyzer",
    "build_demo_response",
    "is_demo_subject",
    "to_investigation_result",
]
