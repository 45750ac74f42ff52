from fastapi import APIRouter

from detective.config.settings import settings
from detective.utils.logger import logger

health_router = APIRouter()


@health_router.get('/')
async def root():
	return {
		'status': 'ok',
		'message': f'{settings.APP_NAME} API is running',
		'version': settings.APP_VERSION,
		'endpoints': {
			'investigate': 'POST /api/investigate',
			'investigate_result': 'POST /api/investigate/result',
			'health': 'GET /health',
		},
	}


@health_router.get('/health')
async def health_check():
	logger.info('Health check requested')
	return {'status': 'ok', 'message': f'{settings.APP_NAME} API is running'}
