from concurrent.futures import ThreadPoolExecutor
from typing import Any

from detective.config.settings import get_llm_client, get_search_provider, settings
from detective.errors import ValidationError
from detective.models import InvestigationResponse, QueryResult, Report
from detective.modules.investigation import (
	EvidenceFetcher,
	QueryPlanner,
	VerdictAnalyzer,
	build_demo_response,
	is_demo_subject,
)
from detective.utils.logger import logger

UNAVAILABLE_FLAG = 'Analysis service unavailable'
FALLBACK_SCORE = 50


def validate_subject(subject_raw: Any) -> str:
	if not isinstance(subject_raw, str) or not subject_raw.strip():
		raise ValidationError('Target is required')
	return subject_raw.strip()


class InvestigationOrchestrator:
	def __init__(self, planner: QueryPlanner, fetcher: EvidenceFetcher, analyzer: VerdictAnalyzer):
		self.planner = planner
		self.fetcher = fetcher
		self.analyzer = analyzer

	def investigate(self, subject_raw: Any) -> InvestigationResponse:
		subject = validate_subject(subject_raw)

		if is_demo_subject(subject):
			logger.info(f'Demo override triggered for "{subject}"')
			return build_demo_response(subject)

		agent_log = [f'[INIT] Starting investigation on "{subject}"']
		logger.info(f'Starting investigation on "{subject}"')

		agent_log.append('[PLAN] Analyzing target type and generating search queries...')
		plan = self.planner.plan(subject)
		agent_log.append(f'[PLAN] Target identified as: {plan.target_type}')
		agent_log.append(f'[PLAN] Generated {len(plan.queries)} search queries')

		agent_log.append('[EXECUTE] Initiating parallel web searches...')
		logs = self._gather(plan.queries, agent_log)
		total = sum(len(result.data) for result in logs)
		agent_log.append(f'[EXECUTE] Total results collected: {total}')
		logger.info(f'Collected {total} evidence items across {len(logs)} queries')

		agent_log.append('[ANALYZE] Processing results with the analysis model...')
		try:
			report = self.analyzer.analyze(subject, logs)
		except Exception as e:
			message = getattr(e, 'message', None) or str(e)
			logger.warning(f'Analysis failed for "{subject}", returning partial results: {message}')
			agent_log.append(f'[ANALYZE] Error: {message}')
			return InvestigationResponse(
				plan=plan.queries,
				logs=logs,
				report=Report(
					score=FALLBACK_SCORE,
					flags=[UNAVAILABLE_FLAG, message],
					verdict=(
						f'Investigation incomplete: {message}. Search results collected but AI analysis failed.'
					),
				),
				agent_log=agent_log,
			)

		agent_log.append(f'[ANALYZE] Legitimacy score: {report.score}%')
		agent_log.append(f'[ANALYZE] Red flags identified: {len(report.flags)}')
		agent_log.append(f'[COMPLETE] Investigation finished. Verdict: {report.verdict}')
		logger.info(f'Investigation on "{subject}" complete with score {report.score}')

		return InvestigationResponse(plan=plan.queries, logs=logs, report=report, agent_log=agent_log)

	def _gather(self, queries: list[str], agent_log: list[str]) -> list[QueryResult]:
		# One worker per query; every fetch is joined before returning.
		with ThreadPoolExecutor(max_workers=max(1, len(queries))) as executor:
			futures = [executor.submit(self.fetcher.fetch, query) for query in queries]

			results = []
			for query, future in zip(queries, futures):
				try:
					data = future.result()
					agent_log.append(f'[EXECUTE] Query "{query}" returned {len(data)} results')
				except Exception as e:
					logger.warning(f'Query "{query}" failed: {e}')
					agent_log.append(f'[EXECUTE] Query "{query}" failed: {e}')
					data = []
				results.append(QueryResult(query=query, data=list(data)))

		return results


def create_orchestrator() -> InvestigationOrchestrator:
	return InvestigationOrchestrator(
		planner=QueryPlanner(),
		fetcher=EvidenceFetcher(get_search_provider(), max_results=settings.SEARCH_MAX_RESULTS),
		analyzer=VerdictAnalyzer(get_llm_client()),
	)
