"""
TMDBClient tests using httpx.MockTransport; no network access.
"""

import httpx
import pytest

from film_degrees.exceptions import ProviderError, ProviderFatalError
from film_degrees.providers.tmdb import TMDBClient, TMDBSettings, image_url

MOVIE_CREDITS = {
    "id": 31,
    "cast": [
        {"id": 13, "title": "Forrest Gump", "poster_path": "/fg.jpg", "popularity": 40.5, "vote_count": 25000},
        {"id": 568, "title": "Apollo 13", "poster_path": "/a13.jpg", "popularity": 55.1, "vote_count": 5000},
        {"id": 9999, "title": "Obscure Short", "poster_path": None, "popularity": 0.6, "vote_count": 3},
    ],
}

FILM_CREDITS = {
    "id": 568,
    "cast": [
        {"id": 4724, "name": "Kevin Bacon", "profile_path": "/kb.jpg", "character": "Jack Swigert", "order": 2},
        {"id": 31, "name": "Tom Hanks", "profile_path": "/th.jpg", "character": "Jim Lovell", "order": 0},
        {"id": 8874, "name": "Bill Paxton", "profile_path": None, "character": "Fred Haise", "order": 1},
    ],
}

PERSON_SEARCH = {
    "results": [
        {"id": 31, "name": "Tom Hanks", "known_for_department": "Acting", "popularity": 80.0,
         "known_for": [{"title": "Forrest Gump", "media_type": "movie"}]},
        {"id": 488, "name": "Tom Hanks Crew", "known_for_department": "Directing", "popularity": 1.0},
    ]
}


def make_client(handler, api_key="test-key") -> TMDBClient:
    settings = TMDBSettings(api_key=api_key, base_url="https://tmdb.test/3")
    return TMDBClient(settings=settings, transport=httpx.MockTransport(handler))


def routes(request: httpx.Request) -> httpx.Response:
    assert request.url.params["api_key"] == "test-key"
    assert request.url.params["language"] == "en-US"
    path = request.url.path
    if path == "/3/person/31/movie_credits":
        return httpx.Response(200, json=MOVIE_CREDITS)
    if path == "/3/movie/568/credits":
        return httpx.Response(200, json=FILM_CREDITS)
    if path == "/3/search/person":
        assert request.url.params["query"] == "tom hanks"
        return httpx.Response(200, json=PERSON_SEARCH)
    if path == "/3/person/31/external_ids":
        return httpx.Response(200, json={"imdb_id": "nm0000158"})
    if path == "/3/movie/568":
        return httpx.Response(200, json={"id": 568, "imdb_id": "tt0112384"})
    if path == "/3/movie/1":
        return httpx.Response(200, json={"id": 1, "imdb_id": ""})
    return httpx.Response(404, json={"status_message": "not found"})


@pytest.mark.asyncio
async def test_neighbor_films_ranked_by_popularity():
    async with make_client(routes) as client:
        films = await client.neighbor_films(31)

    assert [f.id for f in films] == [568, 13, 9999]
    assert films[0].title == "Apollo 13"
    assert films[0].vote_count == 5000
    assert films[0].to_node().image_path == "/a13.jpg"


@pytest.mark.asyncio
async def test_neighbor_cast_ranked_by_billing_order():
    async with make_client(routes) as client:
        members = await client.neighbor_cast(568)

    assert [c.id for c in members] == [31, 8874, 4724]
    assert members[0].to_node().name == "Tom Hanks"


@pytest.mark.asyncio
async def test_search_people_keeps_actors_only():
    async with make_client(routes) as client:
        people = await client.search_people("tom hanks")

    assert [p.id for p in people] == [31]
    assert people[0].known_for[0].title == "Forrest Gump"


@pytest.mark.asyncio
async def test_imdb_ids():
    async with make_client(routes) as client:
        assert await client.person_imdb_id(31) == "nm0000158"
        assert await client.film_imdb_id(568) == "tt0112384"
        assert await client.film_imdb_id(1) is None


@pytest.mark.asyncio
async def test_missing_api_key_is_fatal_without_request():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    async with make_client(handler, api_key=None) as client:
        with pytest.raises(ProviderFatalError, match="TMDB_API_KEY"):
            await client.neighbor_films(31)

    assert calls == []


@pytest.mark.asyncio
async def test_unauthorized_is_fatal():
    async with make_client(lambda request: httpx.Response(401, json={})) as client:
        with pytest.raises(ProviderFatalError):
            await client.neighbor_cast(568)


@pytest.mark.asyncio
async def test_http_error_is_per_item():
    async with make_client(routes) as client:
        with pytest.raises(ProviderError) as excinfo:
            await client.neighbor_cast(404404)

    assert not isinstance(excinfo.value, ProviderFatalError)
    assert "404" in excinfo.value.message


@pytest.mark.asyncio
async def test_transport_error_is_per_item():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(handler) as client:
        with pytest.raises(ProviderError):
            await client.neighbor_films(31)


@pytest.mark.asyncio
async def test_malformed_body_is_per_item():
    async with make_client(lambda request: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(ProviderError):
            await client.neighbor_films(31)

    bad_cast = {"cast": [{"name": "No id"}]}
    async with make_client(lambda request: httpx.Response(200, json=bad_cast)) as client:
        with pytest.raises(ProviderError):
            await client.neighbor_cast(568)


def test_image_url():
    assert image_url("/th.jpg") == "https://image.tmdb.org/t/p/w342/th.jpg"
    assert image_url("/th.jpg", size="w185") == "https://image.tmdb.org/t/p/w185/th.jpg"
    assert image_url(None) == ""


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "abc")
    monkeypatch.setenv("TMDB_LANGUAGE", "de-DE")

    settings = TMDBSettings.from_env()

    assert settings.api_key == "abc"
    assert settings.language == "de-DE"
