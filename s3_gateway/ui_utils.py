from __future__ import annotations
"""Helpers for parsing request paths and formatting listing pages."""
from dataclasses import dataclass
from datetime import datetime
from importlib.metadata import PackageNotFoundError, metadata, version
import mimetypes
from urllib.parse import quote

DIST_NAME = "s3-gateway"
SIZE_UNITS = ("B", "KB", "MB", "GB")
DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class PackageInfo:
    name: str
    version: str
    summary: str
    homepage: str | None


def load_package_info(dist_name: str = DIST_NAME) -> PackageInfo:
    try:
        distribution_metadata = metadata(dist_name)
        package_version = version(dist_name)
    except PackageNotFoundError:
        return PackageInfo(
            name="S3 Gateway",
            version="",
            summary="Browse buckets and objects stored in Amazon S3.",
            homepage=None,
        )
    homepage = distribution_metadata.get("Home-page")
    for entry in distribution_metadata.get_all("Project-URL") or []:
        label, _, link = entry.partition(",")
        if label.strip().lower() == "homepage" and not homepage:
            homepage = link.strip()
    return PackageInfo(
        name=distribution_metadata.get("Name"),
        version=package_version,
        summary=distribution_metadata.get("Summary") or "",
        homepage=homepage or None,
    )


def parse_bucket_and_key(path: str) -> tuple[str | None, str]:
    """Split ``/bucket/a/b/c.png`` into ``("bucket", "a/b/c.png")``.

    Empty segments are discarded, so leading, trailing and repeated slashes
    never change the result. A path without any segment has no bucket.
    """

    parts = [part for part in (path or "").lstrip("/").split("/") if part]
    if not parts:
        return None, ""
    return parts[0], "/".join(parts[1:])


def format_size(size: int | None) -> str:
    if size is None:
        return "-"
    if size <= 0:
        return "0 B"
    value = float(size)
    for unit in SIZE_UNITS:
        if value < 1024 or unit == SIZE_UNITS[-1]:
            break
        value /= 1024
    rounded = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{rounded} {unit}"


def format_timestamp(value: datetime | None) -> str:
    if value is None:
        return "-"
    return value.strftime("%Y-%m-%d %H:%M:%S %Z").rstrip()


def object_href(bucket: str, key: str = "") -> str:
    return "/" + quote(bucket, safe="") + "/" + quote(key, safe="/")


def build_breadcrumbs(bucket: str, prefix: str = "") -> list[tuple[str, str]]:
    crumbs = [("All buckets", "/"), (bucket, object_href(bucket))]
    cumulative = ""
    for segment in (part for part in prefix.split("/") if part):
        cumulative += segment + "/"
        crumbs.append((segment, object_href(bucket, cumulative)))
    return crumbs


def parent_href(bucket: str, prefix: str = "") -> str | None:
    segments = [part for part in prefix.split("/") if part]
    if not segments:
        return None
    parent = "/".join(segments[:-1])
    return object_href(bucket, f"{parent}/" if parent else "")


def strip_prefix(key: str, prefix: str) -> str:
    return key[len(prefix):] if prefix and key.startswith(prefix) else key


def guess_content_type(key: str, stored: str | None = None) -> str:
    if stored:
        return stored
    guessed, _ = mimetypes.guess_type(key.rsplit("/", 1)[-1])
    return guessed or DEFAULT_CONTENT_TYPE
