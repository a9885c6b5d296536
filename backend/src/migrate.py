import asyncio
import sys

import structlog
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from infra.config.config import Config, get_config
from infra.db.session import create_database_schema, create_engine
from infra.logging.config import configure_logging

logger = structlog.stdlib.get_logger(__name__)


async def migrate(config: Config) -> None:
    engine = create_engine(config.DATABASE_CONFIG)

    try:
        logger.info("Running migrations")
        await create_database_schema(engine)
        logger.info("Migration completed successfully")
    finally:
        await engine.dispose()


def main() -> None:
    try:
        config = get_config()
    except ValidationError as e:
        logger.critical("Invalid configuration", error=str(e))
        sys.exit(1)

    configure_logging(
        log_level=config.LOGGING_CONFIG.LEVEL,
        json_logs=config.LOGGING_CONFIG.JSON_FORMAT,
        service_name=config.APP_NAME,
        environment=config.ENVIRONMENT,
        library_log_levels=config.LOGGING_CONFIG.LIBRARY_LOG_LEVELS,
        version=config.VERSION,
    )

    try:
        asyncio.run(migrate(config))
    except (SQLAlchemyError, OSError) as e:
        logger.critical("Failed to migrate database", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
