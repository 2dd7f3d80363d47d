from __future__ import annotations
"""Business logic for reading buckets and objects from S3."""
import logging
from typing import Callable, Iterator

import boto3
from botocore.client import Config
from botocore.exceptions import ClientError

from .models import Bucket, DirectoryListing, ObjectDetails, ObjectDownload, ObjectSummary


LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_KEYS = 1000
CHUNK_SIZE = 64 * 1024
NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound", "NoSuchBucket"}


def is_not_found(exc: ClientError) -> bool:
    """Return True when a client error means the object or bucket does not exist."""

    response = getattr(exc, "response", None) or {}
    code = str(response.get("Error", {}).get("Code", ""))
    status = response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    return code in NOT_FOUND_CODES or status == 404


class S3GatewayService:
    """Read-only access to S3 through one shared client.

    The client is created once and reused for every request; boto3 resolves
    credentials through its default chain so nothing here touches secrets.
    """

    def __init__(
        self,
        client_factory: Callable[..., object] | None = None,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        max_keys: int = DEFAULT_MAX_KEYS,
    ):
        factory = client_factory or boto3.client
        self._client = factory(
            "s3",
            region_name=region_name,
            endpoint_url=endpoint_url,
            config=Config(signature_version="s3v4"),
        )
        self._max_keys = max(int(max_keys), 1)

    def list_buckets(self) -> list[Bucket]:
        """Return the buckets visible to the configured credentials.

        Raises:
            BotoCoreError | ClientError: when unable to connect or list buckets.
        """

        response = self._client.list_buckets()
        return [
            Bucket(name=bucket["Name"], creation_date=bucket.get("CreationDate"))
            for bucket in response.get("Buckets", [])
        ]

    def list_directory(
        self,
        bucket_name: str,
        prefix: str = "",
        *,
        request_path: str | None = None,
    ) -> DirectoryListing | None:
        """Return folders and files directly under ``prefix``, or ``None`` if the bucket is missing.

        Only the first page is read; ``has_more`` reports whether S3 truncated it.
        """

        list_params = {"Bucket": bucket_name, "Delimiter": "/", "MaxKeys": self._max_keys}
        if prefix:
            list_params["Prefix"] = prefix
        try:
            response = self._client.list_objects_v2(**list_params)
        except ClientError as exc:
            if is_not_found(exc):
                LOGGER.debug("Bucket %s not found", bucket_name)
                return None
            raise

        folders = [common["Prefix"] for common in response.get("CommonPrefixes", [])]
        files = [
            ObjectSummary(
                key=obj["Key"],
                size=obj.get("Size"),
                last_modified=obj.get("LastModified"),
            )
            for obj in response.get("Contents", [])
        ]
        LOGGER.debug(
            "Listed s3://%s/%s (%d folder(s), %d file(s))",
            bucket_name,
            prefix,
            len(folders),
            len(files),
        )
        return DirectoryListing(
            bucket=bucket_name,
            prefix=prefix,
            request_path=request_path if request_path is not None else f"/{bucket_name}/{prefix}",
            folders=folders,
            files=files,
            has_more=bool(response.get("IsTruncated", False)),
        )

    def head_object(self, bucket_name: str, key: str) -> ObjectDetails | None:
        """Fetch metadata about a single object, or ``None`` if it does not exist."""

        try:
            response = self._client.head_object(Bucket=bucket_name, Key=key)
        except ClientError as exc:
            if is_not_found(exc):
                return None
            raise
        return ObjectDetails(
            bucket=bucket_name,
            key=key,
            size=response.get("ContentLength"),
            last_modified=response.get("LastModified"),
            etag=response.get("ETag"),
            content_type=response.get("ContentType"),
            cache_control=response.get("CacheControl"),
            metadata=dict(response.get("Metadata") or {}),
        )

    def open_object(self, details: ObjectDetails) -> ObjectDownload:
        """Start reading the body of an object found by :meth:`head_object`."""

        response = self._client.get_object(Bucket=details.bucket, Key=details.key)
        return ObjectDownload(details=details, body=self._iter_body(response["Body"]))

    def _iter_body(self, body) -> Iterator[bytes]:
        try:
            while True:
                chunk = body.read(CHUNK_SIZE)
                if not chunk:
                    break
                yield chunk
        finally:
            body.close()
