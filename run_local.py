import logging

from pantrypal.main import create_app
from pantrypal.settings import settings

app = create_app()

if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    uvicorn.run(
        "run_local:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=False,
    )
