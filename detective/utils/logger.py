import sys

from loguru import logger

from detective.config.settings import settings

CONSOLE_FORMAT = (
	'<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | '
	'<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>'
)
FILE_FORMAT = '{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}'


def setup_logger(level: str | None = None):
	level = level or settings.LOG_LEVEL

	logger.remove()
	logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)
	logger.add(
		settings.LOG_DIR / 'detective.log',
		rotation='50 MB',
		retention='10 days',
		level=level,
		format=FILE_FORMAT,
	)


setup_logger()
