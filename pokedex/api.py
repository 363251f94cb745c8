"""Client for the location-area and pokemon endpoints of PokeAPI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import requests

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"


class PokeAPIError(Exception):
    """Raised when a PokeAPI request fails or returns unusable data."""


@dataclass(frozen=True)
class LocationAreaPage:
    """One page of location areas with links to its neighbours."""

    count: int = 0
    next: str = ""
    previous: str = ""
    names: tuple[str, ...] = ()

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> LocationAreaPage:
        return cls(
            count=data.get("count") or 0,
            next=data.get("next") or "",
            previous=data.get("previous") or "",
            names=tuple(
                result.get("name", "") for result in data.get("results") or ()
            ),
        )


@dataclass(frozen=True)
class Stat:
    name: str
    base_stat: int


@dataclass(frozen=True)
class Pokemon:
    """The parts of a pokemon record that the pokedex keeps."""

    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: tuple[Stat, ...] = field(default_factory=tuple)
    types: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Pokemon:
        return cls(
            name=data.get("name") or "",
            base_experience=data.get("base_experience") or 0,
            height=data.get("height") or 0,
            weight=data.get("weight") or 0,
            stats=tuple(
                Stat(
                    name=(entry.get("stat") or {}).get("name", ""),
                    base_stat=entry.get("base_stat") or 0,
                )
                for entry in data.get("stats") or ()
            ),
            types=tuple(
                (entry.get("type") or {}).get("name", "")
                for entry in data.get("types") or ()
            ),
        )


class PokeAPI:
    """Thin HTTP client over PokeAPI."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
        timeout: float | None = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _get(self, url: str) -> requests.Response:
        try:
            return self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise PokeAPIError(f"failed to make request to PokeAPI: {exc}") from exc

    @staticmethod
    def _json(response: requests.Response, what: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise PokeAPIError(f"failed to {what}: {exc}") from exc

    def location_areas(self, url: str | None = None) -> LocationAreaPage:
        """Fetch a page of location areas; the first page when ``url`` is empty."""
        response = self._get(url or f"{self.base_url}/location-area")
        data = self._json(response, "parse location area JSON")
        if not isinstance(data, dict):
            raise PokeAPIError("failed to parse location area JSON: not an object")
        return LocationAreaPage.from_json(data)

    def location_pokemon(self, location: str) -> list[str]:
        """Return the names of the pokemon that can be met in ``location``."""
        response = self._get(f"{self.base_url}/location-area/{location}")
        if response.status_code != requests.codes.ok:
            raise PokeAPIError(f"PokeAPI returned error code: {response.status_code}")
        data = self._json(response, "parse API response JSON")
        if not isinstance(data, dict):
            raise PokeAPIError("failed to parse API response JSON: not an object")
        names = [
            (encounter.get("pokemon") or {}).get("name", "")
            for encounter in data.get("pokemon_encounters") or ()
        ]
        if not names:
            raise PokeAPIError("no pokemon found in this location area")
        return names

    def pokemon(self, name: str) -> Pokemon:
        """Fetch the record of the pokemon called ``name``."""
        response = self._get(f"{self.base_url}/pokemon/{name}")
        if response.status_code != requests.codes.ok:
            raise PokeAPIError(f"pokeAPI returned error code: {response.status_code}")
        data = self._json(response, "decode Pokemon data")
        if not isinstance(data, dict):
            raise PokeAPIError("failed to decode Pokemon data: not an object")
        return Pokemon.from_json(data)