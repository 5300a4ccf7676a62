# services/api/main.py
import argparse

import uvicorn
from fastapi import FastAPI

from app.settings import settings
from shared.config.logging_config import configure_logging, logger
from .routes import router


def create_app() -> FastAPI:
    """Build the FastAPI application"""
    configure_logging(
        log_level="DEBUG" if settings.debug else settings.log_level,
        log_format=settings.log_format,
        log_file_path=settings.log_file_path,
        log_max_size=settings.log_max_size,
        log_backup_count=settings.log_backup_count,
    )

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
    )
    application.include_router(router)

    if not settings.console_access.is_complete:
        logger.warning("console_access_settings_incomplete", env_prefix="CONSOLE_ACCESS_")

    return application


app = create_app()


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(description="Serve device images with decoded inference results")
    parser.add_argument("--host", default=settings.api_host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.api_port, help="Bind port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    logger.info("starting_api", app=settings.app_name, version=settings.app_version, host=args.host, port=args.port)

    try:
        uvicorn.run("services.api.main:app", host=args.host, port=args.port, reload=args.reload)
    except KeyboardInterrupt:
        logger.info("api_stopped_by_user")


if __name__ == "__main__":
    main()
