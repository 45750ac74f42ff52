from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import httpx
import openai
import pytest
from google.genai import errors as genai_errors

from detective.errors import ErrorCause, ProviderError
from detective.llm.client import LLMClient, classify_provider_error


def openrouter_client_with(completion):
	client = LLMClient(provider='openrouter', model='test/model', api_key='sk-test')
	client._client = Mock()
	client._client.chat.completions.create.return_value = completion
	return client


def test_missing_key_fails_at_call_time():
	client = LLMClient(provider='gemini', model='gemini-2.5-flash', api_key=None)

	with pytest.raises(ProviderError) as exc_info:
		client.generate('hello')

	assert exc_info.value.cause == ErrorCause.MISSING_CREDENTIAL


def test_openrouter_generate_tracks_usage():
	completion = Mock()
	completion.choices = [Mock(message=Mock(content='{"score": 1}'))]
	completion.usage = Mock(prompt_tokens=12, completion_tokens=3)
	client = openrouter_client_with(completion)

	assert client.generate('prompt', system_prompt='be brief') == '{"score": 1}'

	_, kwargs = client._client.chat.completions.create.call_args
	assert kwargs['messages'][0] == {'role': 'system', 'content': 'be brief'}
	assert client.get_usage_stats() == {'input_tokens': 12, 'output_tokens': 3, 'total_tokens': 15}


def test_gemini_generate_returns_text():
	client = LLMClient(provider='gemini', model='gemini-2.5-flash', api_key='g-key')
	client._client = Mock()
	client._client.models.generate_content.return_value = Mock(
		text='{"verdict": "fine"}', usage_metadata=Mock(prompt_token_count=7, candidates_token_count=2)
	)

	assert client.generate('prompt') == '{"verdict": "fine"}'
	assert client.get_usage_stats()['total_tokens'] == 9


def test_sdk_errors_are_tagged_at_call_site():
	client = LLMClient(provider='gemini', model='gemini-2.5-flash', api_key='g-key')
	client._client = Mock()
	client._client.models.generate_content.side_effect = genai_errors.ClientError(
		429, {'error': {'code': 429, 'message': 'Resource exhausted', 'status': 'RESOURCE_EXHAUSTED'}}
	)

	with pytest.raises(ProviderError) as exc_info:
		client.generate('prompt')

	assert exc_info.value.cause == ErrorCause.QUOTA_EXCEEDED


@pytest.mark.parametrize(
	'code, cause',
	[
		(404, ErrorCause.MODEL_NOT_FOUND),
		(401, ErrorCause.UNAUTHORIZED),
		(403, ErrorCause.UNAUTHORIZED),
		(429, ErrorCause.QUOTA_EXCEEDED),
		(400, ErrorCause.GENERIC),
	],
)
def test_classify_gemini_status_codes(code, cause):
	error = genai_errors.ClientError(code, {'error': {'code': code, 'message': 'boom', 'status': 'X'}})
	assert classify_provider_error(error) == cause


def test_classify_unknown_error_is_generic():
	assert classify_provider_error(ValueError('odd')) == ErrorCause.GENERIC
	assert classify_provider_error(TimeoutError()) == ErrorCause.TRANSPORT


OPENROUTER_URL = 'https://openrouter.ai/api/v1/chat/completions'


def openrouter_status_error(error_class, status_code):
	request = httpx.Request('POST', OPENROUTER_URL)
	response = httpx.Response(status_code, request=request)
	return error_class(f'Error code: {status_code}', response=response, body=None)


@pytest.mark.parametrize(
	'error_class, status_code, cause',
	[
		(openai.NotFoundError, 404, ErrorCause.MODEL_NOT_FOUND),
		(openai.AuthenticationError, 401, ErrorCause.UNAUTHORIZED),
		(openai.PermissionDeniedError, 403, ErrorCause.UNAUTHORIZED),
		(openai.RateLimitError, 429, ErrorCause.QUOTA_EXCEEDED),
		(openai.InternalServerError, 500, ErrorCause.GENERIC),
		(openai.APIStatusError, 429, ErrorCause.QUOTA_EXCEEDED),
		(openai.APIStatusError, 502, ErrorCause.GENERIC),
	],
)
def test_classify_openrouter_status_errors(error_class, status_code, cause):
	assert classify_provider_error(openrouter_status_error(error_class, status_code)) == cause


def test_classify_openrouter_connection_errors():
	request = httpx.Request('POST', OPENROUTER_URL)

	assert classify_provider_error(openai.APIConnectionError(request=request)) == ErrorCause.TRANSPORT
	assert classify_provider_error(openai.APITimeoutError(request=request)) == ErrorCause.TRANSPORT


def test_openrouter_sdk_error_is_tagged_at_call_site():
	client = openrouter_client_with(None)
	client._client.chat.completions.create.side_effect = openrouter_status_error(openai.AuthenticationError, 401)

	with pytest.raises(ProviderError) as exc_info:
		client.generate('prompt')

	assert exc_info.value.cause == ErrorCause.UNAUTHORIZED


def test_usage_counters_are_consistent_under_concurrent_calls():
	completion = Mock()
	completion.choices = [Mock(message=Mock(content='{}'))]
	completion.usage = Mock(prompt_tokens=2, completion_tokens=1)
	client = openrouter_client_with(completion)

	with ThreadPoolExecutor(max_workers=8) as executor:
		list(executor.map(lambda _: client.generate('prompt'), range(200)))

	assert client.get_usage_stats() == {'input_tokens': 400, 'output_tokens': 200, 'total_tokens': 600}
