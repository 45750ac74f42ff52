import math
from typing import Any

from detective.errors import AnalysisError, DetectiveError, ErrorCause, describe_analysis_failure
from detective.llm.client import LLMClient
from detective.models import QueryResult, Report
from detective.modules.investigation.prompt_builder import build_analysis_prompt
from detective.utils.json_extraction import extract_json_object
from detective.utils.logger import logger

DEFAULT_SCORE = 50
DEFAULT_VERDICT = 'Investigation inconclusive'


class VerdictAnalyzer:
	def __init__(self, llm_client: LLMClient):
		self.llm_client = llm_client

	def analyze(self, subject: str, results: list[QueryResult]) -> Report:
		prompt = build_analysis_prompt(subject, results)
		logger.info(f'Analyzing {sum(len(r.data) for r in results)} evidence items for "{subject}"')

		try:
			raw_response = self.llm_client.generate(prompt)
			data = extract_json_object(raw_response)
		except DetectiveError as e:
			raise AnalysisError(describe_analysis_failure(e.cause, e.message), e.cause) from e
		except Exception as e:
			raise AnalysisError(describe_analysis_failure(ErrorCause.GENERIC, str(e))) from e

		return normalize_report(data)


def normalize_report(data: dict[str, Any]) -> Report:
	flags = data.get('flags')
	verdict = data.get('verdict')
	verdict_text = str(verdict).strip() if verdict is not None else ''

	return Report(
		score=normalize_score(data.get('score')),
		flags=[str(flag) for flag in flags] if isinstance(flags, list) else [],
		verdict=verdict_text or DEFAULT_VERDICT,
	)


def normalize_score(raw: Any) -> int:
	"""Clamp to [0, 100] and round half up; anything non-numeric becomes the default."""
	if raw is None or isinstance(raw, bool):
		return DEFAULT_SCORE

	try:
		value = float(raw)
	except (TypeError, ValueError):
		return DEFAULT_SCORE

	if math.isnan(value):
		return DEFAULT_SCORE

	value = max(0.0, min(100.0, value))
	return int(math.floor(value + 0.5))
