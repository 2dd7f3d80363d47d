from __future__ import annotations
"""HTML pages for bucket and directory listings."""
import html
from typing import Iterable

from .models import Bucket, DirectoryListing
from .ui_utils import (
    PackageInfo,
    build_breadcrumbs,
    format_size,
    format_timestamp,
    load_package_info,
    object_href,
    parent_href,
    strip_prefix,
)

STYLE = """
body { font-family: -apple-system, "Segoe UI", Roboto, sans-serif; margin: 2rem; color: #222; }
nav.crumbs a { text-decoration: none; }
nav.crumbs span.sep { color: #999; margin: 0 0.3rem; }
table { border-collapse: collapse; width: 100%; margin-top: 1rem; }
th, td { text-align: left; padding: 0.35rem 0.75rem; border-bottom: 1px solid #eee; }
td.size { text-align: right; white-space: nowrap; }
p.notice { color: #a60; }
footer { margin-top: 2rem; color: #999; font-size: 0.85rem; }
"""


def _link(href: str, label: str) -> str:
    return f'<a href="{html.escape(href)}">{html.escape(label)}</a>'


class PageRenderer:
    """Builds complete HTML documents; nothing is cached between requests."""

    def __init__(self, package_info: PackageInfo | None = None):
        self._package_info = package_info or load_package_info()

    def render_buckets(self, buckets: Iterable[Bucket]) -> str:
        rows = [
            f"<tr><td>{_link(object_href(bucket.name), bucket.name + '/')}</td>"
            f"<td>{html.escape(format_timestamp(bucket.creation_date))}</td></tr>"
            for bucket in buckets
        ]
        body = (
            "<h1>Buckets</h1>\n"
            "<table>\n<thead><tr><th>Name</th><th>Created</th></tr></thead>\n"
            f"<tbody>\n{''.join(rows)}\n</tbody>\n</table>"
        )
        return self._document("Buckets", body)

    def render_listing(self, listing: DirectoryListing) -> str:
        bucket, prefix = listing.bucket, listing.prefix
        rows: list[str] = []

        parent = parent_href(bucket, prefix)
        if parent is not None:
            rows.append(f'<tr class="parent"><td>{_link(parent, "../")}</td><td></td><td></td></tr>')

        for folder in listing.folders:
            name = strip_prefix(folder, prefix).rstrip("/")
            rows.append(
                f'<tr class="folder"><td>{_link(object_href(bucket, folder), name + "/")}</td>'
                "<td class=\"size\">-</td><td>-</td></tr>"
            )

        for summary in listing.files:
            name = strip_prefix(summary.key, prefix)
            if not name:
                continue
            rows.append(
                f'<tr class="file"><td>{_link(object_href(bucket, summary.key), name)}</td>'
                f'<td class="size">{html.escape(format_size(summary.size))}</td>'
                f"<td>{html.escape(format_timestamp(summary.last_modified))}</td></tr>"
            )

        crumbs = '<span class="sep">/</span>'.join(
            _link(href, label) for label, href in build_breadcrumbs(bucket, prefix)
        )
        notice = ""
        if listing.has_more:
            notice = '<p class="notice">Only the first page of results is shown.</p>\n'
        body = (
            f'<nav class="crumbs">{crumbs}</nav>\n'
            f"<h1>{html.escape(listing.request_path)}</h1>\n"
            f"{notice}"
            "<table>\n<thead><tr><th>Name</th><th>Size</th><th>Last modified</th></tr></thead>\n"
            f"<tbody>\n{''.join(rows)}\n</tbody>\n</table>"
        )
        return self._document(f"Index of {listing.request_path}", body)

    def _document(self, title: str, body: str) -> str:
        info = self._package_info
        footer = html.escape(f"{info.name} {info.version}".strip())
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n<head>\n<meta charset="utf-8">\n'
            f"<title>{html.escape(title)}</title>\n"
            f"<style>{STYLE}</style>\n"
            "</head>\n<body>\n"
            f"{body}\n"
            f"<footer>{footer}</footer>\n"
            "</body>\n</html>\n"
        )
