import sys

import structlog
import uvicorn
from pydantic import ValidationError

from core.exceptions.component_config_error import ComponentConfigError
from infra.web.app import create_app

logger = structlog.stdlib.get_logger(__name__)


def main() -> None:
    try:
        app = create_app()
    except (ComponentConfigError, ValidationError) as e:
        logger.critical("Failed to start dashboard", error=str(e))
        sys.exit(1)

    uvicorn.run(
        app=app,
        host=app.state.host,
        port=app.state.port,
        access_log=False,
        log_config=None,
    )


if __name__ == "__main__":
    main()
