import requests
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from .base import SearchProvider
from detective.errors import ErrorCause, FetchError
from detective.models import EvidenceItem


class TavilySearchProvider(SearchProvider):
    def __init__(
        self,
        api_key: str | None,
        search_depth: str = "basic",
        timeout: float = 30.0,
        max_attempts: int = 1,
    ):
        self.api_key = api_key
        self.api_url = "https://api.tavily.com/search"
        self.search_depth = search_depth
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)

    def search(self, query: str, max_results: int = 2) -> list[EvidenceItem]:
        if not self.api_key:
            raise FetchError(
                "TAVILY_API_KEY is not set in environment variables",
                ErrorCause.MISSING_CREDENTIAL,
            )

        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=5),
            retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
            reraise=True,
        )

        try:
            data = retrying(self._post, query, max_results)
        except requests.HTTPError as e:
            response = e.response
            status = response.status_code if response is not None else "unknown"
            body = response.text if response is not None else ""
            raise FetchError(f"Tavily API error: {status} - {body}", ErrorCause.TRANSPORT) from e
        except requests.RequestException as e:
            raise FetchError(f"Tavily request failed: {e}", ErrorCause.TRANSPORT) from e
        except ValueError as e:
            raise FetchError(f"Tavily returned an unreadable body: {e}", ErrorCause.TRANSPORT) from e

        return self._parse_tavily_response(data)

    def _post(self, query: str, max_results: int) -> dict:
        response = requests.post(
            self.api_url,
            headers={"Content-Type": "application/json"},
            json={
                "api_key": self.api_key,
                "query": query,
                "search_depth": self.search_depth,
                "max_results": max_results,
            },
            timeout=self.timeout,
        )

        response.raise_for_status()
        return response.json()

    def _parse_tavily_response(self, data) -> list[EvidenceItem]:
        if not isinstance(data, dict):
            return []

        return [
            EvidenceItem.from_raw(item)
            for item in data.get("results") or []
            if isinstance(item, dict)
        ]
