import argparse
import sys

import uvicorn
from dotenv import load_dotenv


def main():
	load_dotenv()

	from detective.config.settings import settings

	parser = argparse.ArgumentParser(description=settings.APP_NAME)
	parser.add_argument('--host', default=settings.HOST, help='Interface to bind')
	parser.add_argument('--port', type=int, default=settings.PORT, help='Port to listen on')
	parser.add_argument('--reload', action='store_true', help='Reload on code changes')

	args = parser.parse_args()

	print(f'{settings.APP_NAME} API server running on http://{args.host}:{args.port}')
	uvicorn.run('detective.api.main:app', host=args.host, port=args.port, reload=args.reload)


if __name__ == '__main__':
	try:
		main()
	except KeyboardInterrupt:
		print('\n\nServer stopped.')
		sys.exit(0)
