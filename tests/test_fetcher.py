import asyncio
import logging

import httpx
import pytest

from tourism_atlas.data.fetcher import SourceFetcher

HOTELS = [{"name": "فندق", "city": "طرابلس", "rating": 4, "date": "2024-01-01"}]


def _fetch(fetcher: SourceFetcher, filename: str):
    return asyncio.run(fetcher.fetch(filename))


def test_fetches_remote_file_from_repository_branch(make_config) -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["headers"] = dict(request.headers)
        return httpx.Response(200, json=HOTELS)

    config = make_config(github_repo="org/atlas", branch="dev")
    records = _fetch(SourceFetcher(config, transport=httpx.MockTransport(handler)), "hotels.json")

    assert records == HOTELS
    assert seen["url"] == "https://raw.githubusercontent.com/org/atlas/dev/hotels.json"
    assert "x-requested-with" not in seen["headers"]


def test_proxy_mode_rewrites_base_url_and_adds_header(make_config) -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["host"] = request.url.host
        seen["path"] = request.url.path
        seen["header"] = request.headers.get("X-Requested-With")
        return httpx.Response(200, json=[])

    config = make_config(use_proxy=True, github_repo="org/atlas", branch="main")
    _fetch(SourceFetcher(config, transport=httpx.MockTransport(handler)), "beaches.json")

    assert seen["host"] == "cors-anywhere.herokuapp.com"
    assert seen["path"].endswith("raw.githubusercontent.com/org/atlas/main/beaches.json")
    assert seen["header"] == "XMLHttpRequest"


def test_follows_redirect_to_renamed_repository(make_config) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if "/org/old/" in request.url.path:
            return httpx.Response(301, headers={"Location": str(request.url).replace("/org/old/", "/org/new/")})
        return httpx.Response(200, json=HOTELS)

    config = make_config(github_repo="org/old", branch="main", fallback_to_local=False)
    records = _fetch(SourceFetcher(config, transport=httpx.MockTransport(handler)), "hotels.json")

    assert records == HOTELS


def test_non_success_status_falls_back_to_local_file(make_config, write_local, caplog) -> None:
    write_local("hotels.json", HOTELS)
    transport = httpx.MockTransport(lambda request: httpx.Response(404, text="missing"))

    with caplog.at_level(logging.WARNING, logger="tourism_atlas.data.fetcher"):
        records = _fetch(SourceFetcher(make_config(), transport=transport), "hotels.json")

    assert records == HOTELS
    assert "Failed to load hotels.json" in caplog.text
    assert "status: 404" in caplog.text


def test_transport_error_falls_back_to_local_file(make_config, write_local) -> None:
    write_local("hotels.json", HOTELS)

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    records = _fetch(SourceFetcher(make_config(), transport=httpx.MockTransport(handler)), "hotels.json")

    assert records == HOTELS


def test_remote_and_local_failure_returns_empty(make_config, caplog) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(500))

    with caplog.at_level(logging.WARNING, logger="tourism_atlas.data.fetcher"):
        records = _fetch(SourceFetcher(make_config(), transport=transport), "hotels.json")

    assert records == []
    assert "Failed to load local hotels.json" in caplog.text


def test_local_fallback_disabled_skips_local_file(make_config, write_local) -> None:
    write_local("hotels.json", HOTELS)
    transport = httpx.MockTransport(lambda request: httpx.Response(503))

    records = _fetch(
        SourceFetcher(make_config(fallback_to_local=False), transport=transport),
        "hotels.json",
    )

    assert records == []


def test_body_that_is_not_a_json_array_is_a_failure(make_config, write_local) -> None:
    write_local("hotels.json", HOTELS)
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"hotels": HOTELS}))

    records = _fetch(SourceFetcher(make_config(), transport=transport), "hotels.json")

    assert records == HOTELS


def test_invalid_json_body_and_local_file_resolve_to_empty(make_config, tmp_path) -> None:
    (tmp_path / "hotels.json").write_text("[{broken", encoding="utf-8")
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>rate limited</html>"))

    records = _fetch(SourceFetcher(make_config(), transport=transport), "hotels.json")

    assert records == []


def test_non_object_items_are_dropped(make_config) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[HOTELS[0], "stray", 3]))

    records = _fetch(SourceFetcher(make_config(), transport=transport), "hotels.json")

    assert records == HOTELS


def test_unexpected_error_propagates(make_config, write_local) -> None:
    write_local("hotels.json", HOTELS)

    def handler(request: httpx.Request) -> httpx.Response:
        raise RuntimeError("bug in handler")

    fetcher = SourceFetcher(make_config(), transport=httpx.MockTransport(handler))

    with pytest.raises(RuntimeError, match="bug in handler"):
        _fetch(fetcher, "hotels.json")
