"""Tests for walking paged Bitbucket collections."""

from unittest.mock import Mock

import pytest

from bitbucket_cloud.bitbucket.pagination import (
    PagedCollectionWalker,
    PageResponse,
    page_len_for,
)
from bitbucket_cloud.exceptions import (
    BitbucketApiError,
    BitbucketCloudError,
    BitbucketNotFoundError,
)

NEXT_PAGE = "https://api.bitbucket.org/2.0/repositories/ws/repo/watchers?pagelen=2&page=2"
LAST_PAGE = "https://api.bitbucket.org/2.0/repositories/ws/repo/watchers?pagelen=2&page=3"


def not_found() -> BitbucketNotFoundError:
    return BitbucketNotFoundError("not found", 404, url="https://example/404")


@pytest.fixture
def mock_client():
    """Create a mock client whose _get serves three pages."""
    client = Mock()
    client.config.page_len = 2
    client._get.side_effect = [
        {"values": [1, 2], "page": 1, "pagelen": 2, "next": NEXT_PAGE},
        {"values": [3, 4], "page": 2, "pagelen": 2, "next": LAST_PAGE},
        {"values": [5], "page": 3, "pagelen": 2},
    ]
    return client


class TestPageResponse:
    def test_from_api_response(self):
        page = PageResponse.from_api_response(
            {"values": [{"a": 1}], "next": NEXT_PAGE, "page": 1, "pagelen": 10}
        )

        assert page.values == [{"a": 1}]
        assert page.next == NEXT_PAGE
        assert page.page == 1
        assert page.pagelen == 10
        assert not page.is_last

    def test_missing_next_is_last_page(self):
        page = PageResponse.from_api_response({"values": []})

        assert page.next is None
        assert page.is_last

    def test_empty_next_is_last_page(self):
        assert PageResponse.from_api_response({"values": [], "next": ""}).is_last

    def test_rejects_non_collection(self):
        with pytest.raises(BitbucketCloudError, match="Expected a paged collection"):
            PageResponse.from_api_response([1, 2])

    def test_rejects_non_list_values(self):
        with pytest.raises(BitbucketCloudError, match="not a list"):
            PageResponse.from_api_response({"values": {"a": 1}})


class TestPagedCollectionWalker:
    def test_walks_every_page_in_order(self, mock_client):
        walker = PagedCollectionWalker(mock_client, lambda value: value * 10)

        result = walker.walk("/repositories/ws/repo/watchers")

        assert result == [10, 20, 30, 40, 50]
        assert mock_client._get.call_count == 3

    def test_query_params_only_sent_with_first_request(self, mock_client):
        walker = PagedCollectionWalker(mock_client, lambda value: value)

        walker.walk("/repositories/ws/repo/watchers", params={"q": "x"})

        calls = mock_client._get.call_args_list
        assert calls[0].args == ("/repositories/ws/repo/watchers",)
        assert calls[0].kwargs["params"] == [("q", "x"), ("pagelen", 2)]
        assert calls[1].args == (NEXT_PAGE,)
        assert calls[1].kwargs["params"] is None
        assert calls[2].args == (LAST_PAGE,)
        assert calls[2].kwargs["params"] is None

    def test_keeps_explicit_pagelen(self, mock_client):
        walker = PagedCollectionWalker(mock_client, lambda value: value)

        walker.walk("/x", params=[("include", "a"), ("pagelen", "7")])

        assert mock_client._get.call_args_list[0].kwargs["params"] == [
            ("include", "a"),
            ("pagelen", "7"),
        ]

    def test_stops_once_max_items_reached(self, mock_client):
        walker = PagedCollectionWalker(mock_client, lambda value: value, max_items=3)

        result = walker.walk("/x")

        assert result == [1, 2, 3]
        assert mock_client._get.call_count == 2

    def test_max_items_on_page_boundary_does_not_fetch_next_page(self, mock_client):
        walker = PagedCollectionWalker(mock_client, lambda value: value, max_items=2)

        assert walker.walk("/x") == [1, 2]
        assert mock_client._get.call_count == 1

    def test_max_items_larger_than_collection(self, mock_client):
        walker = PagedCollectionWalker(mock_client, lambda value: value, max_items=50)

        assert walker.walk("/x") == [1, 2, 3, 4, 5]

    def test_max_items_zero_sends_no_request(self, mock_client):
        walker = PagedCollectionWalker(mock_client, lambda value: value, max_items=0)

        assert walker.walk("/x") == []
        mock_client._get.assert_not_called()

    def test_negative_max_items_rejected(self, mock_client):
        with pytest.raises(ValueError, match="non-negative"):
            PagedCollectionWalker(mock_client, lambda value: value, max_items=-1)

    def test_soft_not_found_on_first_page_returns_empty(self, mock_client):
        mock_client._get.side_effect = not_found()
        walker = PagedCollectionWalker(
            mock_client, lambda value: value, soft_not_found=True
        )

        assert walker.walk("/x") == []

    def test_empty_first_page_body_returns_empty_when_soft(self, mock_client):
        mock_client._get.side_effect = [None]
        walker = PagedCollectionWalker(
            mock_client, lambda value: value, soft_not_found=True
        )

        assert walker.walk("/x") == []

    def test_empty_first_page_body_rejected_when_not_soft(self, mock_client):
        mock_client._get.side_effect = [None]
        walker = PagedCollectionWalker(mock_client, lambda value: value)

        with pytest.raises(BitbucketCloudError, match="Expected a paged collection"):
            walker.walk("/x")

    def test_not_found_propagates_when_not_soft(self, mock_client):
        mock_client._get.side_effect = not_found()
        walker = PagedCollectionWalker(mock_client, lambda value: value)

        with pytest.raises(BitbucketNotFoundError):
            walker.walk("/x")

    def test_not_found_on_later_page_propagates_even_when_soft(self, mock_client):
        mock_client._get.side_effect = [
            {"values": [1], "next": NEXT_PAGE},
            not_found(),
        ]
        walker = PagedCollectionWalker(
            mock_client, lambda value: value, soft_not_found=True
        )

        with pytest.raises(BitbucketNotFoundError):
            walker.walk("/x")

    def test_other_api_errors_propagate_when_soft(self, mock_client):
        mock_client._get.side_effect = BitbucketApiError("boom", 500)
        walker = PagedCollectionWalker(
            mock_client, lambda value: value, soft_not_found=True
        )

        with pytest.raises(BitbucketApiError, match="boom"):
            walker.walk("/x")


@pytest.mark.parametrize(
    "max_items, default, expected",
    [
        (None, 50, 50),
        (None, 500, 100),
        (3, 50, 3),
        (103, 50, 50),
        (103, 100, 100),
        (0, 50, 1),
    ],
)
def test_page_len_for(max_items, default, expected):
    assert page_len_for(max_items, default) == expected


@pytest.mark.parametrize("max_items", [0, 1, 9, 10, 11, 24, 25])
def test_bounded_listing_is_prefix_of_full_listing(fetcher, samples, max_items):
    """Bounded listings return exactly max items, in unbounded server order."""
    mercurial = samples.mercurial
    everything = fetcher.list_watchers(mercurial.workspace, mercurial.slug)

    bounded = fetcher.list_watchers(
        mercurial.workspace, mercurial.slug, max_items=max_items
    )

    assert len(everything) == samples.watcher_count
    assert [w.uuid for w in bounded] == [w.uuid for w in everything[:max_items]]


def test_walk_follows_absolute_next_links(fetcher, fake_session, samples):
    mercurial = samples.mercurial

    fetcher.list_watchers(mercurial.workspace, mercurial.slug)

    urls = [url for _, url, _ in fake_session.calls]
    assert len(urls) == 3
    assert urls[0] == "https://api.bitbucket.org/2.0/repositories/mirror/mercurial/watchers"
    assert all(url.startswith("https://api.bitbucket.org/2.0/") for url in urls[1:])
    assert "page=2" in urls[1]
    assert "page=3" in urls[2]
