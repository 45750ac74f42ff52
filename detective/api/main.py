from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from detective.api.routes.health import health_router
from detective.api.routes.investigate import get_orchestrator, investigate_router
from detective.config.settings import settings
from detective.utils.logger import logger, setup_logger


def create_app():
	setup_logger()  # Ensure logger is set up before FastAPI app initialization
	logger.info(f'Starting {settings.APP_NAME} FastAPI application...')

	app = FastAPI(
		title=settings.APP_NAME,
		version=settings.APP_VERSION,
		description='Crypto legitimacy investigation API',
	)

	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.CORS_ORIGINS,
		allow_methods=['*'],
		allow_headers=['*'],
	)

	app.include_router(health_router)
	app.include_router(investigate_router, prefix='/api')

	@app.exception_handler(RequestValidationError)
	async def request_validation_handler(request: Request, exc: RequestValidationError):
		errors = exc.errors()
		logger.info(f'Malformed request to {request.url.path}: {errors}')
		body_error = any(tuple(error.get('loc', ()))[:1] == ('body',) for error in errors)
		message = 'Target is required' if body_error else 'Invalid request'
		return JSONResponse(status_code=400, content={'success': False, 'error': message})

	@app.on_event('startup')
	async def startup_event():
		# Provider clients are built once here from the environment.
		get_orchestrator()
		logger.info('FastAPI app startup complete.')

	@app.on_event('shutdown')
	async def shutdown_event():
		logger.info('FastAPI app shutdown complete.')

	return app


app = create_app()
