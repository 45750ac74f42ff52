import logging
import threading
from enum import Enum

import openai
from google.genai import errors as genai_errors

from detective.errors import ErrorCause, ProviderError

logger = logging.getLogger(__name__)


class LLMProvider(Enum):
	GEMINI = 'gemini'
	OPENROUTER = 'openrouter'


class LLMClient:
	def __init__(
		self,
		provider: str,
		model: str,
		api_key: str | None,
		temperature: float = 0.2,
		max_tokens: int = 2048,
		timeout: float = 60.0,
	):
		self.provider = LLMProvider(provider)
		self.model = model
		self.api_key = api_key
		self.temperature = temperature
		self.max_tokens = max_tokens
		self.timeout = timeout

		self.total_input_tokens = 0
		self.total_output_tokens = 0
		self._usage_lock = threading.Lock()

		# A missing key is reported when generate() is called, not at startup.
		self._client = self._initialize_client() if api_key else None
		logger.info(f'LLM Client initialized: {provider}/{model}')

	def _initialize_client(self):
		if self.provider == LLMProvider.GEMINI:
			from google import genai
			from google.genai import types

			return genai.Client(
				api_key=self.api_key,
				http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),
			)
		elif self.provider == LLMProvider.OPENROUTER:
			from openai import OpenAI

			return OpenAI(base_url='https://openrouter.ai/api/v1', api_key=self.api_key, timeout=self.timeout)
		else:
			raise ValueError(f'Unsupported provider: {self.provider}')

	def generate(self, prompt: str, system_prompt: str | None = None) -> str:
		if self._client is None:
			raise ProviderError(
				f'No API key configured for {self.provider.value} model {self.model}',
				ErrorCause.MISSING_CREDENTIAL,
			)

		logger.info(f'Generating with {self.provider.value}/{self.model}...')

		try:
			if self.provider == LLMProvider.GEMINI:
				response = self._generate_gemini(prompt, system_prompt)
			else:
				response = self._generate_openrouter(prompt, system_prompt)
		except Exception as e:
			cause = classify_provider_error(e)
			logger.error(f'Generation failed ({cause.value}): {e}')
			raise ProviderError(str(e), cause) from e

		usage = self.get_usage_stats()
		logger.info(f'Generation complete. Tokens used: input={usage["input_tokens"]}, output={usage["output_tokens"]}')
		return response

	def _generate_gemini(self, prompt: str, system_prompt: str | None) -> str:
		from google.genai import types

		response = self._client.models.generate_content(
			model=self.model,
			contents=prompt,
			config=types.GenerateContentConfig(
				temperature=self.temperature,
				max_output_tokens=self.max_tokens,
				system_instruction=system_prompt,
			),
		)

		usage = getattr(response, 'usage_metadata', None)
		if usage:
			self._record_usage(usage.prompt_token_count or 0, usage.candidates_token_count or 0)

		return response.text or ''

	def _generate_openrouter(self, prompt: str, system_prompt: str | None) -> str:
		messages = []

		if system_prompt:
			messages.append({'role': 'system', 'content': system_prompt})

		messages.append({'role': 'user', 'content': prompt})

		response = self._client.chat.completions.create(
			model=self.model, messages=messages, temperature=self.temperature, max_tokens=self.max_tokens
		)

		# Track usage
		if hasattr(response, 'usage') and response.usage:
			self._record_usage(response.usage.prompt_tokens, response.usage.completion_tokens)

		return response.choices[0].message.content or ''

	def _record_usage(self, input_tokens: int, output_tokens: int):
		# One client serves concurrent requests.
		with self._usage_lock:
			self.total_input_tokens += input_tokens
			self.total_output_tokens += output_tokens

	def get_usage_stats(self) -> dict[str, int]:
		"""Get token usage statistics."""
		with self._usage_lock:
			return {
				'input_tokens': self.total_input_tokens,
				'output_tokens': self.total_output_tokens,
				'total_tokens': self.total_input_tokens + self.total_output_tokens,
			}


def classify_provider_error(error: Exception) -> ErrorCause:
	"""Map an SDK exception to an ErrorCause using the SDK's own types and status codes."""
	if isinstance(error, genai_errors.APIError):
		return _cause_for_status(error.code)

	if isinstance(error, openai.NotFoundError):
		return ErrorCause.MODEL_NOT_FOUND
	if isinstance(error, (openai.AuthenticationError, openai.PermissionDeniedError)):
		return ErrorCause.UNAUTHORIZED
	if isinstance(error, openai.RateLimitError):
		return ErrorCause.QUOTA_EXCEEDED
	if isinstance(error, (openai.APIConnectionError, ConnectionError, TimeoutError)):
		return ErrorCause.TRANSPORT
	if isinstance(error, openai.APIStatusError):
		return _cause_for_status(error.status_code)

	return ErrorCause.GENERIC


def _cause_for_status(status: int | None) -> ErrorCause:
	if status == 404:
		return ErrorCause.MODEL_NOT_FOUND
	if status in (401, 403):
		return ErrorCause.UNAUTHORIZED
	if status == 429:
		return ErrorCause.QUOTA_EXCEEDED
	return ErrorCause.GENERIC

