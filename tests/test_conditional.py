"""Tests for conditional request negotiation."""

import pytest
from starlette.datastructures import Headers

from responder.conditional import CacheValidation, NoCacheValidation, select_cache_strategy
from responder.types import Validators
from responder.validators import format_http_date

LAST_MODIFIED = 1700000000


@pytest.fixture
def validators():
    return Validators(last_modified=format_http_date(LAST_MODIFIED), etag='abc123')


@pytest.fixture
def cache():
    return CacheValidation()


def request(**headers):
    return Headers(headers={name.replace('_', '-'): value for name, value in headers.items()})


def test_matching_etag_is_not_modified(cache, validators):
    assert cache.is_not_modified(request(If_None_Match='"abc123"'), validators)


def test_unquoted_etag_does_not_match(cache, validators):
    assert not cache.is_not_modified(request(If_None_Match='abc123'), validators)


def test_other_etag_is_modified(cache, validators):
    assert not cache.is_not_modified(request(If_None_Match='"other"'), validators)


def test_etag_in_list_matches(cache, validators):
    assert cache.is_not_modified(request(If_None_Match='"other", "abc123"'), validators)


def test_wildcard_etag_matches(cache, validators):
    assert cache.is_not_modified(request(If_None_Match='*'), validators)


def test_modified_since_equal_is_not_modified(cache, validators):
    headers = request(If_Modified_Since=format_http_date(LAST_MODIFIED))
    assert cache.is_not_modified(headers, validators)


def test_modified_since_later_is_not_modified(cache, validators):
    headers = request(If_Modified_Since=format_http_date(LAST_MODIFIED + 1))
    assert cache.is_not_modified(headers, validators)


def test_modified_since_earlier_is_modified(cache, validators):
    headers = request(If_Modified_Since=format_http_date(LAST_MODIFIED - 1))
    assert not cache.is_not_modified(headers, validators)


def test_unparseable_modified_since_is_modified(cache, validators):
    assert not cache.is_not_modified(request(If_Modified_Since='yesterday'), validators)


def test_either_validator_is_enough(cache, validators):
    headers = request(
        If_None_Match='"other"',
        If_Modified_Since=format_http_date(LAST_MODIFIED)
    )
    assert cache.is_not_modified(headers, validators)


def test_no_conditional_headers_is_modified(cache, validators):
    assert not cache.is_not_modified(request(), validators)


def test_cache_headers():
    assert CacheValidation().cache_headers() == {'Cache-Control': 'public, max-age=600'}
    assert CacheValidation(public=False, max_age=60).cache_headers() == {
        'Cache-Control': 'private, max-age=60'
    }


def test_validator_headers_quote_etag(cache, validators):
    assert cache.validator_headers(validators) == {'ETag': '"abc123"'}


def test_prevention_headers(cache):
    headers = cache.prevention_headers()
    assert 'no-store' in headers['Cache-Control']
    assert headers['Pragma'] == 'no-cache'


def test_no_cache_validation_never_matches(validators):
    disabled = NoCacheValidation()
    assert not disabled.enabled
    assert not disabled.is_not_modified(request(If_None_Match='"abc123"'), validators)
    assert disabled.cache_headers() == {}
    assert disabled.validator_headers(validators) == {}
    assert disabled.prevention_headers() == {}


def test_select_cache_strategy():
    assert isinstance(select_cache_strategy(True), CacheValidation)
    assert isinstance(select_cache_strategy(False), NoCacheValidation)
    assert select_cache_strategy(True, public=False, max_age=5).max_age == 5
