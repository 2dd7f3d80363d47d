from __future__ import annotations
"""FastAPI application exposing the gateway over HTTP."""
import logging

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response, StreamingResponse

from .controller import BadPathError, S3GatewayController
from .models import DirectoryListing
from .renderer import PageRenderer
from .ui_utils import load_package_info


LOGGER = logging.getLogger(__name__)

USAGE = "Bad path. Use /<bucket>/<key...>  e.g. /my-bucket/index.html"


def create_app(
    controller: S3GatewayController | None = None,
    renderer: PageRenderer | None = None,
) -> FastAPI:
    """Build the application around one shared controller."""

    package_info = load_package_info()
    controller = controller or S3GatewayController()
    renderer = renderer or PageRenderer(package_info)

    app = FastAPI(
        title="S3 Gateway",
        description="Browse S3 buckets and objects with local credentials",
        version=package_info.version or "0.0.0",
        docs_url=None,
        redoc_url=None,
    )

    # Handlers are sync so blocking boto3 calls run in the threadpool.
    @app.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
    def list_buckets() -> Response:
        try:
            buckets = controller.list_buckets()
        except (BotoCoreError, ClientError):
            LOGGER.exception("Error listing buckets")
            return PlainTextResponse("Error listing buckets", status_code=500)
        LOGGER.debug("Listed %d bucket(s)", len(buckets))
        return HTMLResponse(renderer.render_buckets(buckets))

    @app.api_route("/{path:path}", methods=["GET", "HEAD"])
    def browse(path: str, request: Request) -> Response:
        # decoded path; keys may contain "#" or "?"
        request_path = request.scope["path"]
        try:
            result = controller.resolve(request_path, include_body=request.method != "HEAD")
        except BadPathError:
            return PlainTextResponse(USAGE, status_code=400)
        except (BotoCoreError, ClientError):
            LOGGER.exception("Error fetching %s", request_path)
            return PlainTextResponse("Error fetching from object storage", status_code=500)

        if result is None:
            return PlainTextResponse("Not found", status_code=404)
        if isinstance(result, DirectoryListing):
            return HTMLResponse(renderer.render_listing(result))
        # stored Content-Type is sent verbatim, without a charset suffix
        return StreamingResponse(result.body, headers=result.headers)

    return app
