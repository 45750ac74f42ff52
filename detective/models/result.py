from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FindingCategory(Enum):
	NEWS = 'news'
	LEGAL = 'legal'
	SOCIAL = 'social'
	FINANCIAL = 'financial'
	GENERAL = 'general'


class VerdictLabel(Enum):
	SAFE = 'SAFE'
	SORT_OF_RISKY = 'SORT OF RISKY'
	LIKELY_RISKY = 'LIKELY RISKY'


@dataclass(frozen=True)
class Finding:
	id: str
	title: str
	source: str
	url: str
	snippet: str
	category: FindingCategory

	def to_dict(self) -> dict[str, Any]:
		return {
			'id': self.id,
			'title': self.title,
			'source': self.source,
			'url': self.url,
			'snippet': self.snippet,
			'category': self.category.value,
		}


@dataclass
class InvestigationResult:
	subject: str
	findings: list[Finding]
	summary: str
	legitimacy_score: int
	verdict: VerdictLabel
	agent_log: list[str] = field(default_factory=list)
	created_at: str | None = None  # ISO timestamp

	def to_dict(self) -> dict[str, Any]:
		return {
			'subject': self.subject,
			'findings': [finding.to_dict() for finding in self.findings],
			'summary': self.summary,
			'legitimacyScore': self.legitimacy_score,
			'verdict': self.verdict.value,
			'agentLog': list(self.agent_log),
			'createdAt': self.created_at,
		}
