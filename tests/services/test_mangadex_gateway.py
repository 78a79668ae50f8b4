"""Unit tests for MangaDexGateway using httpx.MockTransport."""

import httpx
import pytest

from manga_details.core import AUTHOR, COVER_ART
from manga_details.services import MangaDexGateway

MANGA_PAYLOAD = {
    "result": "ok",
    "data": {
        "id": "abc",
        "type": "manga",
        "attributes": {
            "title": {"en": "Berserk"},
            "altTitles": [{"ja": "ベルセルク"}, {"en": "The Black Swordsman"}],
            "description": {"en": "A dark tale."},
            "year": 1989,
            "status": "ongoing",
            "tags": [
                {"id": "t1", "attributes": {"name": {"en": "Action"}}},
                {"id": "t2", "attributes": {"name": {"ja": "ホラー"}}},
            ],
        },
        "relationships": [
            {"id": "cov1", "type": COVER_ART},
            {"id": "auth1", "type": AUTHOR},
        ],
    },
}


def make_gateway(handler):
    client = httpx.Client(base_url="https://api.test", transport=httpx.MockTransport(handler))
    return MangaDexGateway(base_url="https://api.test", client=client)


def json_handler(routes, status_code=200):
    """Serve canned JSON bodies by path and record requests."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path not in routes:
            return httpx.Response(404, json={"result": "error"})
        return httpx.Response(status_code, json=routes[request.url.path])

    handler.seen = seen
    return handler


class TestFetchItem:
    def test_parses_manga(self):
        gateway = make_gateway(json_handler({"/manga/abc": MANGA_PAYLOAD}))
        lookup = gateway.fetch_item("abc")

        assert not lookup.is_error
        item = lookup.item
        assert item.id == "abc"
        assert item.title == {"en": "Berserk"}
        assert item.alt_titles[1] == {"en": "The Black Swordsman"}
        assert item.year == 1989
        assert item.status == "ongoing"
        assert [t.name for t in item.tags] == [{"en": "Action"}, {"ja": "ホラー"}]
        assert item.first_relationship(COVER_ART).id == "cov1"
        assert item.first_relationship(AUTHOR).id == "auth1"

    def test_http_error_is_failure(self):
        gateway = make_gateway(json_handler({}))
        lookup = gateway.fetch_item("missing")
        assert lookup.is_error
        assert lookup.item is None

    def test_transport_error_is_failure(self):
        def handler(request):
            raise httpx.ConnectError("offline", request=request)

        assert make_gateway(handler).fetch_item("abc").is_error

    def test_invalid_json_is_failure(self):
        gateway = make_gateway(lambda request: httpx.Response(200, content=b"<html>"))
        assert gateway.fetch_item("abc").is_error

    def test_missing_data_is_failure(self):
        gateway = make_gateway(json_handler({"/manga/abc": {"result": "ok"}}))
        assert gateway.fetch_item("abc").is_error

    def test_sparse_attributes(self):
        payload = {"data": {"id": "abc", "attributes": {"year": "1989"}}}
        item = make_gateway(json_handler({"/manga/abc": payload})).fetch_item("abc").item
        assert item.title == {}
        assert item.year is None
        assert item.relationships == ()


class TestFetchCover:
    def test_returns_file_name(self):
        routes = {"/cover/cov1": {"data": {"attributes": {"fileName": "x.jpg"}}}}
        lookup = make_gateway(json_handler(routes)).fetch_cover("cov1")
        assert not lookup.is_error
        assert lookup.cover.file_name == "x.jpg"

    def test_missing_file_name_is_failure(self):
        routes = {"/cover/cov1": {"data": {"attributes": {}}}}
        assert make_gateway(json_handler(routes)).fetch_cover("cov1").is_error

    def test_server_error_is_failure(self):
        handler = json_handler({"/cover/cov1": {"data": {}}}, status_code=500)
        assert make_gateway(handler).fetch_cover("cov1").is_error


class TestFetchCreatorName:
    def test_returns_name(self):
        routes = {"/author/auth1": {"data": {"attributes": {"name": "Kentaro Miura"}}}}
        assert make_gateway(json_handler(routes)).fetch_creator_name("auth1") == "Kentaro Miura"

    @pytest.mark.parametrize(
        "routes",
        [
            {},
            {"/author/auth1": {"data": {"attributes": {}}}},
            {"/author/auth1": {"data": {"attributes": {"name": ""}}}},
            {"/author/auth1": {"data": "broken"}},
        ],
    )
    def test_any_failure_returns_unknown_author(self, routes):
        assert make_gateway(json_handler(routes)).fetch_creator_name("auth1") == "Unknown author"


class TestFetchFeed:
    def test_parses_chapters_and_sends_feed_query(self):
        routes = {
            "/manga/abc/feed": {
                "data": [
                    {"id": "c1", "attributes": {"chapter": "1", "title": "Start"}},
                    {"id": "c2", "attributes": {"chapter": None, "title": None}},
                    {"attributes": {"chapter": "3"}},
                ]
            }
        }
        handler = json_handler(routes)
        entries = make_gateway(handler).fetch_feed("abc")

        assert [(e.id, e.chapter, e.title) for e in entries] == [
            ("c1", "1", "Start"),
            ("c2", None, None),
        ]
        params = handler.seen[0].url.params
        assert params["limit"] == "500"
        assert params["translatedLanguage[]"] == "en"
        assert params["order[chapter]"] == "desc"
        assert params["includeEmptyPages"] == "0"

    def test_failure_returns_empty_list(self):
        assert make_gateway(json_handler({})).fetch_feed("abc") == []

    def test_non_list_data_returns_empty_list(self):
        routes = {"/manga/abc/feed": {"data": {"id": "c1"}}}
        assert make_gateway(json_handler(routes)).fetch_feed("abc") == []


def test_close_leaves_injected_client_open():
    client = httpx.Client(transport=httpx.MockTransport(json_handler({})))
    gateway = MangaDexGateway(base_url="https://api.test", client=client)
    gateway.close()
    assert not client.is_closed
    client.close()


def test_close_owned_client():
    gateway = MangaDexGateway(base_url="https://api.test/")
    assert gateway.base_url == "https://api.test"
    gateway.close()
    assert gateway._client.is_closed


class TestMalformedPayloads:
    def test_non_string_localized_values_are_dropped(self):
        payload = {
            "data": {
                "id": "abc",
                "attributes": {
                    "title": {"en": 7, "ja": "ベルセルク"},
                    "altTitles": [{"en": ["x"]}, "junk"],
                    "description": {"en": None},
                    "tags": [{"id": "t1", "attributes": {"name": {"en": 7}}}],
                },
            }
        }
        item = make_gateway(json_handler({"/manga/abc": payload})).fetch_item("abc").item

        assert item.title == {"ja": "ベルセルク"}
        assert item.alt_titles == ({}, {})
        assert item.description == {}
        assert item.tags[0].name == {}

    def test_non_list_collections_are_ignored(self):
        payload = {
            "data": {
                "id": "abc",
                "attributes": {"tags": 3, "altTitles": "Berserk"},
                "relationships": {"type": "author"},
            }
        }
        lookup = make_gateway(json_handler({"/manga/abc": payload})).fetch_item("abc")

        assert not lookup.is_error
        assert lookup.item.tags == ()
        assert lookup.item.alt_titles == ()
        assert lookup.item.relationships == ()


class TestInvalidIdentifiers:
    """Identifiers that cannot form a URL fail the single lookup, never raise."""

    BAD_ID = "ab\x01c"

    @pytest.fixture
    def gateway(self):
        return make_gateway(json_handler({}))

    def test_fetch_item(self, gateway):
        assert gateway.fetch_item(self.BAD_ID).is_error

    def test_fetch_cover(self, gateway):
        assert gateway.fetch_cover(self.BAD_ID).is_error

    def test_fetch_creator_name(self, gateway):
        assert gateway.fetch_creator_name(self.BAD_ID) == "Unknown author"

    def test_fetch_feed(self, gateway):
        assert gateway.fetch_feed(self.BAD_ID) == []
