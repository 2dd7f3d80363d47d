from __future__ import annotations
"""Routes request paths to bucket listings, directory listings or objects."""
import logging

from .models import Bucket, DirectoryListing, ObjectDownload
from .services import S3GatewayService
from .ui_utils import parse_bucket_and_key


LOGGER = logging.getLogger(__name__)


class BadPathError(ValueError):
    """Raised when a request path does not name a bucket."""


class S3GatewayController:
    """Coordinates request resolution with the :class:`S3GatewayService`."""

    def __init__(self, service: S3GatewayService | None = None):
        self._service = service or S3GatewayService()

    def list_buckets(self) -> list[Bucket]:
        return self._service.list_buckets()

    def resolve(
        self,
        path: str,
        *,
        include_body: bool = True,
    ) -> DirectoryListing | ObjectDownload | None:
        """Resolve ``path`` to a listing, an object, or ``None`` when nothing exists.

        Keys ending in ``/`` (or empty) are directories and always render.
        Other keys are tried as objects first; when the object is missing the
        key is retried as a directory, which must contain at least one entry.
        A missing bucket resolves to ``None`` on every branch. With
        ``include_body`` false the object body is never requested.
        """

        bucket, key = parse_bucket_and_key(path)
        if not bucket:
            raise BadPathError(f"No bucket in path '{path}'")

        # parse_bucket_and_key drops trailing slashes, so check the raw path
        if not key or path.endswith("/"):
            prefix = f"{key}/" if key else ""
            LOGGER.debug("Listing directory s3://%s/%s", bucket, prefix)
            return self._list_directory(bucket, prefix)

        download = self._resolve_object(bucket, key, include_body=include_body)
        if download is not None:
            return download

        LOGGER.debug("No object at s3://%s/%s, trying as directory", bucket, key)
        listing = self._list_directory(bucket, f"{key}/")
        if listing is None or listing.is_empty:
            return None
        return listing

    def _resolve_object(self, bucket: str, key: str, *, include_body: bool) -> ObjectDownload | None:
        details = self._service.head_object(bucket, key)
        if details is None:
            return None
        if not include_body:
            return ObjectDownload(details=details, body=iter(()))
        LOGGER.debug("Streaming s3://%s/%s (%s bytes)", bucket, key, details.size)
        return self._service.open_object(details)

    def _list_directory(self, bucket: str, prefix: str) -> DirectoryListing | None:
        return self._service.list_directory(
            bucket,
            prefix,
            request_path=f"/{bucket}/{prefix}",
        )
