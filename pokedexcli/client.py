"""HTTP client for the Pokemon API with a response cache."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

import requests

from .cache import Cache
from .models import LocationArea, Pokemon, ResourceList

BASE_URL = "https://pokeapi.co/api/v2"

T = TypeVar("T")


class ApiError(Exception):
    """A request to the API failed or returned something unusable."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _decode(data: bytes, parse: Callable[[Any], T]) -> T:
    try:
        return parse(json.loads(data))
    except (ValueError, TypeError) as exc:
        raise ApiError(f"invalid response: {exc}") from exc


class Client:
    """Fetches API resources, keeping raw responses in a cache."""

    def __init__(self, timeout: float = 5.0, interval: float = 300.0) -> None:
        self.timeout = timeout
        self.cache = Cache(interval)
        self._session = requests.Session()

    def list_location_areas(self, page_url: str | None = None) -> ResourceList:
        """Return a page of location areas; the first page when no URL is given."""
        url = BASE_URL + "/location-area" if page_url is None else page_url
        return self._fetch(url, ResourceList.from_dict)

    def get_location_area(self, name: str) -> LocationArea:
        """Return the named location area with its Pokemon encounters."""
        return self._fetch(f"{BASE_URL}/location-area/{name}", LocationArea.from_dict)

    def get_pokemon(self, name: str) -> Pokemon:
        """Return the details of the named Pokemon."""
        return self._fetch(f"{BASE_URL}/pokemon/{name}", Pokemon.from_dict)

    def close(self) -> None:
        """Release the HTTP session and stop the cache reaper."""
        self._session.close()
        self.cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch(self, url: str, parse: Callable[[Any], T]) -> T:
        cached = self.cache.get(url)
        if cached is not None:
            return _decode(cached, parse)

        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ApiError(f"request to {url} failed: {exc}") from exc

        with response:
            if response.status_code >= 300:
                raise ApiError(
                    f"Response failed with status code: {response.status_code}",
                    response.status_code,
                )
            data = response.content

        result = _decode(data, parse)
        self.cache.add(url, data)
        return result