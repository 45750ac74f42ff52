from detective.models import EvidenceItem
from detective.modules.search_provider import SearchProvider
from detective.utils.logger import logger


class EvidenceFetcher:
	def __init__(self, search_provider: SearchProvider, max_results: int = 2):
		self.search_provider = search_provider
		self.max_results = max_results

	def fetch(self, query: str) -> list[EvidenceItem]:
		"""Run one search. Failures are logged and yield an empty list."""
		try:
			results = self.search_provider.search(query, self.max_results)
		except Exception as e:
			logger.error(f'Search failed for query "{query}": {e}')
			return []

		logger.debug(f'Query "{query}" returned {len(results)} results')
		return results
