import json
from unittest.mock import Mock

import pytest

from detective.models import EvidenceItem
from detective.modules.investigation import EvidenceFetcher, QueryPlanner, VerdictAnalyzer
from detective.core.orchestrator import InvestigationOrchestrator
from detective.modules.search_provider import SearchProvider


class FakeSearchProvider(SearchProvider):
	def __init__(self, error: Exception | None = None):
		self.error = error
		self.queries = []

	def search(self, query: str, max_results: int = 2) -> list[EvidenceItem]:
		self.queries.append(query)
		if self.error:
			raise self.error
		return [
			EvidenceItem(title=f'{query} #{i}', content=f'content for {query}', url=f'https://news.example.com/{i}')
			for i in range(max_results)
		]


@pytest.fixture
def search_provider():
	return FakeSearchProvider()


@pytest.fixture
def llm_client():
	client = Mock()
	client.generate.return_value = json.dumps(
		{'score': 72, 'flags': ['Anonymous team'], 'verdict': 'Smells clean, for now.'}
	)
	return client


@pytest.fixture
def orchestrator(search_provider, llm_client):
	return InvestigationOrchestrator(
		planner=QueryPlanner(),
		fetcher=EvidenceFetcher(search_provider, max_results=2),
		analyzer=VerdictAnalyzer(llm_client),
	)
