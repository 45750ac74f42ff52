from dataclasses import dataclass, field
from typing import Any

DEFAULT_TITLE = 'Untitled'
DEFAULT_URL = '#'


@dataclass(frozen=True)
class EvidenceItem:
	title: str = DEFAULT_TITLE
	content: str = ''
	url: str = DEFAULT_URL

	@classmethod
	def from_raw(cls, raw: dict[str, Any]) -> 'EvidenceItem':
		"""Normalize one provider hit, filling defaults for missing or empty fields."""
		return cls(
			title=raw.get('title') or DEFAULT_TITLE,
			content=raw.get('content') or raw.get('snippet') or '',
			url=raw.get('url') or DEFAULT_URL,
		)

	def to_dict(self) -> dict[str, str]:
		return {'title': self.title, 'content': self.content, 'url': self.url}


@dataclass
class QueryResult:
	query: str
	data: list[EvidenceItem] = field(default_factory=list)

	def to_dict(self) -> dict[str, Any]:
		return {'query': self.query, 'data': [item.to_dict() for item in self.data]}

	@classmethod
	def from_dict(cls, raw: dict[str, Any]) -> 'QueryResult':
		return cls(query=raw['query'], data=[EvidenceItem.from_raw(item) for item in raw.get('data') or []])


@dataclass(frozen=True)
class QueryPlan:
	queries: list[str]
	target_type: str


@dataclass
class Report:
	score: int
	flags: list[str]
	verdict: str

	def to_dict(self) -> dict[str, Any]:
		return {'score': self.score, 'flags': list(self.flags), 'verdict': self.verdict}

	@classmethod
	def from_dict(cls, raw: dict[str, Any]) -> 'Report':
		return cls(score=int(raw['score']), flags=list(raw.get('flags') or []), verdict=raw['verdict'])


@dataclass
class InvestigationResponse:
	plan: list[str]
	logs: list[QueryResult]
	report: Report
	agent_log: list[str] = field(default_factory=list)

	def to_dict(self, include_agent_log: bool = False) -> dict[str, Any]:
		payload = {
			'plan': list(self.plan),
			'logs': [result.to_dict() for result in self.logs],
			'report': self.report.to_dict(),
		}
		if include_agent_log:
			payload['agentLog'] = list(self.agent_log)
		return payload

	@classmethod
	def from_dict(cls, raw: dict[str, Any]) -> 'InvestigationResponse':
		return cls(
			plan=list(raw['plan']),
			logs=[QueryResult.from_dict(item) for item in raw['logs']],
			report=Report.from_dict(raw['report']),
			agent_log=list(raw.get('agentLog') or []),
		)
