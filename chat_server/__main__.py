# chat_server/__main__.py

import uvicorn

from chat_server.config import get_settings
from chat_server.main import create_app


def main():
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
