from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from detective.llm.client import LLMClient
from detective.modules.search_provider import SearchProvider, TavilySearchProvider


class SearchBackend(Enum):
	TAVILY = 'tavily'


class Settings(BaseSettings):
	GEMINI_API_KEY: str | None = None
	OPENROUTER_API_KEY: str | None = None

	# Search settings
	SEARCH_BACKEND: str = 'tavily'
	TAVILY_API_KEY: str | None = None
	SEARCH_DEPTH: str = 'basic'
	SEARCH_MAX_RESULTS: int = 2
	SEARCH_TIMEOUT: float = 30.0
	SEARCH_MAX_ATTEMPTS: int = 1

	# Analysis settings
	LLM_PROVIDER: str = 'gemini'
	ANALYSIS_MODEL: str = 'gemini-2.5-flash'
	ANALYSIS_TIMEOUT: float = 60.0
	ANALYSIS_MAX_TOKENS: int = 2048

	# App Settings
	APP_NAME: str = 'Deep Detective'
	APP_VERSION: str = '1.0.0'
	LOG_LEVEL: str = 'INFO'
	HOST: str = '0.0.0.0'
	PORT: int = 3001
	CORS_ORIGINS: list[str] = ['*']

	# Paths
	BASE_DIR: Path = Path(__file__).parent.parent.parent
	LOG_DIR: Path = BASE_DIR / 'logs'

	model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')


def get_search_provider() -> SearchProvider:
	backend = SearchBackend(settings.SEARCH_BACKEND.lower())

	if backend == SearchBackend.TAVILY:
		return TavilySearchProvider(
			api_key=settings.TAVILY_API_KEY,
			search_depth=settings.SEARCH_DEPTH,
			timeout=settings.SEARCH_TIMEOUT,
			max_attempts=settings.SEARCH_MAX_ATTEMPTS,
		)

	raise ValueError(f'Unsupported search backend: {settings.SEARCH_BACKEND}')


def get_llm_client() -> LLMClient:
	provider = settings.LLM_PROVIDER.lower()
	api_key = settings.OPENROUTER_API_KEY if provider == 'openrouter' else settings.GEMINI_API_KEY

	return LLMClient(
		provider=provider,
		model=settings.ANALYSIS_MODEL,
		api_key=api_key,
		temperature=0.2,
		max_tokens=settings.ANALYSIS_MAX_TOKENS,
		timeout=settings.ANALYSIS_TIMEOUT,
	)


settings = Settings()
