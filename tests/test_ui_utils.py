import unittest
from datetime import datetime, timezone

from s3_gateway.ui_utils import (
    build_breadcrumbs,
    format_size,
    format_timestamp,
    guess_content_type,
    object_href,
    parent_href,
    parse_bucket_and_key,
)


class ParseBucketAndKeyTests(unittest.TestCase):
    def test_splits_bucket_and_key(self):
        self.assertEqual(("my-bucket", "a/b/c.png"), parse_bucket_and_key("/my-bucket/a/b/c.png"))
        self.assertEqual(("my-bucket", ""), parse_bucket_and_key("/my-bucket"))

    def test_missing_bucket(self):
        for path in ("", "/", "////", None):
            with self.subTest(path=path):
                self.assertEqual((None, ""), parse_bucket_and_key(path))

    def test_empty_segments_are_ignored(self):
        expected = ("bad", "path/file")
        for path in ("/bad//path/file", "//bad/path/file/", "bad/path//file//"):
            with self.subTest(path=path):
                self.assertEqual(expected, parse_bucket_and_key(path))

    def test_reparsing_normalized_form_is_stable(self):
        for path in ("/b/k", "//b//x/y//", "/b", "b/a/b/c.png"):
            with self.subTest(path=path):
                bucket, key = parse_bucket_and_key(path)
                self.assertEqual((bucket, key), parse_bucket_and_key(f"/{bucket}/{key}"))


class FormatSizeTests(unittest.TestCase):
    def test_formats_with_binary_units(self):
        self.assertEqual("0 B", format_size(0))
        self.assertEqual("512 B", format_size(512))
        self.assertEqual("1 KB", format_size(1024))
        self.assertEqual("1.5 KB", format_size(1536))
        self.assertEqual("1.33 MB", format_size(1394606))
        self.assertEqual("2 GB", format_size(2 * 1024 ** 3))
        self.assertEqual("2048 GB", format_size(2 * 1024 ** 4))

    def test_missing_size(self):
        self.assertEqual("-", format_size(None))


class LinkTests(unittest.TestCase):
    def test_object_href_encodes_segments(self):
        self.assertEqual("/bucket/a%20b/c%23d.txt", object_href("bucket", "a b/c#d.txt"))
        self.assertEqual("/bucket/", object_href("bucket"))

    def test_breadcrumbs_link_cumulative_paths(self):
        self.assertEqual(
            [
                ("All buckets", "/"),
                ("bucket", "/bucket/"),
                ("a", "/bucket/a/"),
                ("b", "/bucket/a/b/"),
            ],
            build_breadcrumbs("bucket", "a/b/"),
        )

    def test_parent_href(self):
        self.assertIsNone(parent_href("bucket", ""))
        self.assertEqual("/bucket/", parent_href("bucket", "a/"))
        self.assertEqual("/bucket/a/", parent_href("bucket", "a/b/"))


class MiscTests(unittest.TestCase):
    def test_guess_content_type_prefers_stored_value(self):
        self.assertEqual("image/webp", guess_content_type("file.txt", "image/webp"))
        self.assertEqual("text/plain", guess_content_type("dir/file.txt"))
        self.assertEqual("application/octet-stream", guess_content_type("dir/no-extension"))

    def test_format_timestamp(self):
        self.assertEqual("-", format_timestamp(None))
        self.assertEqual("2024-01-02 03:04:05", format_timestamp(datetime(2024, 1, 2, 3, 4, 5)))
        self.assertEqual(
            "2024-01-02 03:04:05 UTC",
            format_timestamp(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)),
        )


if __name__ == "__main__":
    unittest.main()
