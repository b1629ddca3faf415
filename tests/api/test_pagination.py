import pytest
from typing import Any, Dict
from mindat_api.api.models import PaginatedResponse, CursorPaginatedResponse, Country

NEXT_CURSOR_URL = "https://api.mindat.org/v1/localities/?cursor=abc123&page_size=10"


@pytest.mark.parametrize("count, page_size, expected", [(25, 10, 3), (20, 10, 2), (0, 10, 0), (1, 10, 1),
                                                        (None, 10, None)])
def test_total_pages(count, page_size, expected):
    """total_pages is the ceiling of count / page_size, or None when the count is unknown"""
    envelope = PaginatedResponse[Dict[str, Any]](count=count, results=[])
    assert envelope.total_pages(page_size) == expected


def test_total_pages_rejects_invalid_page_size():
    envelope = PaginatedResponse[Dict[str, Any]](count=25, results=[])
    with pytest.raises(ValueError):
        envelope.total_pages(0)


def test_cursor_extraction():
    """The cursor is read from the absolute next URL"""
    envelope = CursorPaginatedResponse[Dict[str, Any]](next=NEXT_CURSOR_URL, results=[])
    assert envelope.has_next()
    assert not envelope.has_previous()
    assert envelope.next_cursor() == "abc123"
    assert envelope.next_page() is None
    assert envelope.previous_cursor() is None


def test_page_extraction():
    envelope = PaginatedResponse[Dict[str, Any]](
        count=120,
        next="https://api.mindat.org/v1/countries/?page=3",
        previous="https://api.mindat.org/v1/countries/",
        results=[],
    )
    assert envelope.next_page() == 3
    assert envelope.previous_page() is None
    assert envelope.has_previous()


@pytest.mark.parametrize(
    "url",
    [None, "", "?cursor=abc123", "/v1/localities/?cursor=abc123", "not a url", "https://api.mindat.org/v1/?page=x"],
)
def test_navigation_never_raises(url):
    """Relative, malformed or missing URLs, and non-integer pages, all yield None"""
    envelope = CursorPaginatedResponse[Dict[str, Any]](next=url, results=[])
    assert envelope.next_cursor() is None
    assert envelope.next_page() is None


def test_envelopes_are_iterable_and_sized(countries_page_json):
    """Envelopes iterate over and count their results"""
    envelope = PaginatedResponse[Country].model_validate(countries_page_json)
    assert len(envelope) == 2
    assert [country.text for country in envelope] == ["Norway", "Sweden"]
    assert envelope.count == 2
    assert not envelope.has_next()
