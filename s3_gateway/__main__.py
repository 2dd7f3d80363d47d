"""Module entry point for the S3 gateway."""
import logging

from dotenv import load_dotenv
import uvicorn

from .app import create_app
from .controller import S3GatewayController
from .services import S3GatewayService
from .settings import load_settings

LOGGER = logging.getLogger(__name__)


def main() -> None:
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    service = S3GatewayService(
        region_name=settings.region_name,
        endpoint_url=settings.endpoint_url,
        max_keys=settings.max_keys,
    )
    app = create_app(S3GatewayController(service))

    LOGGER.info("Open: http://%s:%d/", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
