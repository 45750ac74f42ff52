from abc import ABC, abstractmethod
from detective.models import EvidenceItem


class SearchProvider(ABC):
    @abstractmethod
    def search(self, query: str, max_results: int = 2) -> list[EvidenceItem]:
        raise NotImplementedError
