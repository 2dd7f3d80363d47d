from __future__ import annotations
"""Data models representing S3 listings and objects served by the gateway."""
from dataclasses import dataclass, field
from datetime import datetime
from email.utils import formatdate
from typing import Iterator, Optional

from .ui_utils import guess_content_type


@dataclass
class Bucket:
    """A bucket visible to the configured credentials."""

    name: str
    creation_date: Optional[datetime] = None


@dataclass
class ObjectSummary:
    """A single object row returned by a listing call."""

    key: str
    size: Optional[int] = None
    last_modified: Optional[datetime] = None


@dataclass
class DirectoryListing:
    """Folders and files found directly under a prefix."""

    bucket: str
    prefix: str = ""
    request_path: str = ""
    folders: list[str] = field(default_factory=list)
    files: list[ObjectSummary] = field(default_factory=list)
    has_more: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.folders and not self.files


@dataclass
class ObjectDetails:
    """Metadata about a single S3 object."""

    bucket: str
    key: str
    size: Optional[int] = None
    last_modified: Optional[datetime] = None
    etag: Optional[str] = None
    content_type: Optional[str] = None
    cache_control: Optional[str] = None
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class ObjectDownload:
    """An object body paired with the metadata used to serve it."""

    details: ObjectDetails
    body: Iterator[bytes]

    @property
    def media_type(self) -> str:
        return guess_content_type(self.details.key, self.details.content_type)

    @property
    def headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": self.media_type}
        if self.details.cache_control:
            headers["Cache-Control"] = self.details.cache_control
        if self.details.etag:
            headers["ETag"] = self.details.etag
        if self.details.size is not None:
            headers["Content-Length"] = str(self.details.size)
        if isinstance(self.details.last_modified, datetime):
            headers["Last-Modified"] = formatdate(self.details.last_modified.timestamp(), usegmt=True)
        return headers
