import json
import re
from typing import Any

from detective.errors import ErrorCause, ReplyParseError

_FENCE_PATTERN = re.compile(r'```[\w+-]*[ \t]*\n?')
_OBJECT_PATTERN = re.compile(r'\{.*\}', re.DOTALL)


def strip_code_fences(text: str) -> str:
	return _FENCE_PATTERN.sub('', text).strip()


def extract_json_object(text: str) -> dict[str, Any]:
	"""Recover the JSON object embedded in a free-form model reply.

	Code fences (with or without a language tag) are removed first, then the span from
	the first ``{`` to the last ``}`` is parsed. Raises ReplyParseError tagged with
	PARSE_NO_OBJECT when no braces are present and PARSE_INVALID_JSON when the span does
	not parse.
	"""
	cleaned = strip_code_fences(text or '')

	match = _OBJECT_PATTERN.search(cleaned)
	if not match:
		raise ReplyParseError('No JSON object found in model reply', ErrorCause.PARSE_NO_OBJECT)

	try:
		data = json.loads(match.group(0))
	except json.JSONDecodeError as e:
		raise ReplyParseError(f'Invalid JSON in model reply: {e}', ErrorCause.PARSE_INVALID_JSON) from e

	if not isinstance(data, dict):
		raise ReplyParseError('Model reply JSON is not an object', ErrorCause.PARSE_INVALID_JSON)

	return data
