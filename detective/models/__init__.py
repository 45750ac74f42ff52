from .investigation import (
    EvidenceItem,
    QueryResult,
    QueryPlan,
    Report,
    InvestigationResponse,
)
from .result import (
    Finding,
    FindingCategory,
    InvestigationResult,
    VerdictLabel,
)


__all__ = [
    "EvidenceItem",
    "QueryResult",
    "QueryPlan",
    "Report",
    "InvestigationResponse",
    "Finding",
    "FindingCategory",
    "InvestigationResult",
    "VerdictLabel",
]
