import uvicorn

from doc_extractor.api.app import create_app
from doc_extractor.config.settings import Settings
from doc_extractor.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> serve the API."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
