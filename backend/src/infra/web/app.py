from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from core.domain.component_tree import ComponentTree
from core.port.outage_repository import OutageRepository
from infra.adapter.postgres_outage_repository import PostgresOutageRepository
from infra.config.component_config_loader import load_component_tree
from infra.config.config import Config, get_config
from infra.db.session import (
    check_database_connection,
    create_database_schema,
    create_engine,
    create_session_factory,
)
from infra.logging.config import configure_logging
from infra.utils.clock import Clock, utc_now
from infra.web.errors import register_exception_handlers
from infra.web.middleware.request_log_middleware import RequestLogMiddleware
from infra.web.routers.component_router import router as component_router
from infra.web.routers.health_router import router as health_router
from infra.web.routers.outage_router import router as outage_router
from infra.web.routers.status_router import router as status_router

logger = structlog.stdlib.get_logger(__name__)


def create_app(
    config: Optional[Config] = None,
    component_tree: Optional[ComponentTree] = None,
    outage_repository: Optional[OutageRepository] = None,
    clock: Clock = utc_now,
) -> FastAPI:
    """Build the dashboard app.

    The component tree and outage repository are created here once and handed
    to request handlers through ``app.state``; tests pass their own instead.
    """
    config = config or get_config()

    configure_logging(
        log_level=config.LOGGING_CONFIG.LEVEL,
        json_logs=config.LOGGING_CONFIG.JSON_FORMAT,
        service_name=config.APP_NAME,
        environment=config.ENVIRONMENT,
        library_log_levels=config.LOGGING_CONFIG.LIBRARY_LOG_LEVELS,
        version=config.VERSION,
    )

    if component_tree is None:
        component_tree = load_component_tree(config.COMPONENTS_CONFIG_PATH)

    engine = None
    if outage_repository is None:
        engine = create_engine(config.DATABASE_CONFIG)
        outage_repository = PostgresOutageRepository(create_session_factory(engine))

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if engine is not None:
            try:
                await check_database_connection(engine)
            except (SQLAlchemyError, OSError) as e:
                logger.critical("Database is unreachable", error=str(e))
                await engine.dispose()
                raise

            if config.DATABASE_CONFIG.AUTO_CREATE_SCHEMA:
                await create_database_schema(engine)

        logger.info(
            "Dashboard started",
            component_count=len(component_tree.components),
            cors_origin=config.CORS_ORIGIN,
        )

        yield

        if engine is not None:
            await engine.dispose()

    app = FastAPI(
        title=config.APP_NAME,
        version=config.VERSION,
        root_path=config.ROOT_PATH,
        docs_url="/apidocs",
        lifespan=lifespan,
    )

    app.state.host = config.HOST
    app.state.port = config.PORT
    app.state.component_tree = component_tree
    app.state.outage_repository = outage_repository
    app.state.clock = clock

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.CORS_ORIGIN],
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware, excluded_paths={"/health"})

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(component_router)
    app.include_router(outage_router)
    app.include_router(status_router)

    return app
