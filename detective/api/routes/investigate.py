from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from detective.core.orchestrator import InvestigationOrchestrator, create_orchestrator, validate_subject
from detective.errors import ValidationError
from detective.modules.investigation import to_investigation_result
from detective.utils.logger import logger

investigate_router = APIRouter()


class InvestigateRequest(BaseModel):
	# Left untyped so a non-string target is rejected with our own 400 instead of a 422.
	target: Any = None
	subject: Any = None

	model_config = ConfigDict(extra='ignore')

	def requested_target(self) -> Any:
		return self.target if self.target is not None else self.subject


@lru_cache
def get_orchestrator() -> InvestigationOrchestrator:
	return create_orchestrator()


def error_response(status_code: int, message: str) -> JSONResponse:
	return JSONResponse(status_code=status_code, content={'success': False, 'error': message})


@investigate_router.post('/investigate')
def investigate(
	payload: InvestigateRequest | None = Body(default=None),
	diagnostics: bool = False,
	orchestrator: InvestigationOrchestrator = Depends(get_orchestrator),
):
	target = payload.requested_target() if payload else None

	try:
		response = orchestrator.investigate(target)
	except ValidationError as e:
		logger.info(f'Rejected investigation request: {e.message}')
		return error_response(400, e.message)
	except Exception as e:
		logger.exception(f'Investigation error: {e}')
		return error_response(500, str(e) or 'Internal server error during investigation')

	return response.to_dict(include_agent_log=diagnostics)


@investigate_router.post('/investigate/result')
def investigate_result(
	payload: InvestigateRequest | None = Body(default=None),
	orchestrator: InvestigationOrchestrator = Depends(get_orchestrator),
):
	target = payload.requested_target() if payload else None

	try:
		subject = validate_subject(target)
		response = orchestrator.investigate(subject)
	except ValidationError as e:
		logger.info(f'Rejected investigation request: {e.message}')
		return error_response(400, e.message)
	except Exception as e:
		logger.exception(f'Investigation error: {e}')
		return error_response(500, str(e) or 'Internal server error during investigation')

	result = to_investigation_result(subject, response)
	return {'success': True, 'data': result.to_dict()}
