"""Tests for content metadata and cache validator derivation."""

import hashlib
import os

from responder.files import LocalFile
from responder.validators import (
    basic_headers,
    derive_validators,
    format_http_date,
    generate_etag,
    parse_http_date,
)


def test_format_http_date_is_gmt(sample_mtime):
    assert format_http_date(0) == 'Thu, 01 Jan 1970 00:00:00 GMT'
    assert format_http_date(sample_mtime) == 'Tue, 14 Nov 2023 22:13:20 GMT'


def test_format_http_date_pads_day():
    assert format_http_date(1704153600) == 'Tue, 02 Jan 2024 00:00:00 GMT'


def test_parse_http_date_round_trips_formatted_dates(sample_mtime):
    assert parse_http_date(format_http_date(sample_mtime)) == sample_mtime


def test_parse_http_date_rejects_garbage():
    assert parse_http_date('not a date') is None
    assert parse_http_date('') is None
    assert parse_http_date(None) is None


def test_basic_headers(sample_file, sample_content):
    headers = basic_headers(sample_file)
    assert headers == {
        'Content-Length': str(len(sample_content)),
        'Content-Type': 'text/plain',
    }


def test_basic_headers_omits_unknown_content_type(untyped_file):
    headers = basic_headers(untyped_file)
    assert headers == {'Content-Length': '4'}
    assert 'Content-Type' not in headers


def test_etag_is_hash_of_mtime_and_path(sample_file, sample_mtime):
    expected = hashlib.md5(f"{sample_mtime}{sample_file.path}".encode('utf-8')).hexdigest()
    assert generate_etag(sample_file) == expected


def test_etag_is_stable_for_unchanged_file(sample_file):
    assert generate_etag(sample_file) == generate_etag(LocalFile(sample_file.path))


def test_etag_differs_for_identical_content_at_other_path(sample_file, tmp_path, sample_content, sample_mtime):
    copy_path = tmp_path / 'copy.txt'
    copy_path.write_bytes(sample_content)
    os.utime(copy_path, (sample_mtime, sample_mtime))
    assert generate_etag(LocalFile(copy_path)) != generate_etag(sample_file)


def test_etag_changes_with_mtime(sample_path, sample_mtime):
    before = generate_etag(LocalFile(sample_path))
    os.utime(sample_path, (sample_mtime + 10, sample_mtime + 10))
    assert generate_etag(LocalFile(sample_path)) != before


def test_derive_validators(sample_file):
    validators = derive_validators(sample_file)
    assert validators.last_modified == 'Tue, 14 Nov 2023 22:13:20 GMT'
    assert validators.etag == generate_etag(sample_file)
    assert validators.quoted_etag == f'"{validators.etag}"'
