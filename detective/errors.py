from enum import Enum


class ErrorCause(Enum):
	MISSING_CREDENTIAL = 'missing_credential'
	MODEL_NOT_FOUND = 'model_not_found'
	UNAUTHORIZED = 'unauthorized'
	QUOTA_EXCEEDED = 'quota_exceeded'
	PARSE_NO_OBJECT = 'parse_no_object'
	PARSE_INVALID_JSON = 'parse_invalid_json'
	TRANSPORT = 'transport'
	GENERIC = 'generic'


class DetectiveError(Exception):
	def __init__(self, message: str, cause: ErrorCause = ErrorCause.GENERIC):
		super().__init__(message)
		self.message = message
		self.cause = cause


class ValidationError(DetectiveError):
	pass


class FetchError(DetectiveError):
	pass


class ProviderError(DetectiveError):
	"""Raised by the LLM client with the cause classified at the call site."""


class ReplyParseError(DetectiveError):
	pass


class AnalysisError(DetectiveError):
	pass


_ANALYSIS_MESSAGES = {
	ErrorCause.MISSING_CREDENTIAL: 'Model API key is not configured. Set GEMINI_API_KEY (or OPENROUTER_API_KEY) in the .env file.',
	ErrorCause.MODEL_NOT_FOUND: (
		'AI model not found. The model name may be incorrect or your API key may not have access. Error: {detail}'
	),
	ErrorCause.UNAUTHORIZED: 'API authentication failed. Please check your model API key in the .env file.',
	ErrorCause.QUOTA_EXCEEDED: 'API quota exceeded. Please try again later.',
	ErrorCause.PARSE_NO_OBJECT: 'Analysis error: model reply did not contain a JSON object',
	ErrorCause.PARSE_INVALID_JSON: 'Analysis error: model reply contained malformed JSON ({detail})',
}


def describe_analysis_failure(cause: ErrorCause, detail: str) -> str:
	template = _ANALYSIS_MESSAGES.get(cause, 'Analysis error: {detail}')
	return template.format(detail=detail)
