"""Typed views of the API's JSON resources."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key}: expected an integer, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string, got {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{key}: expected a boolean, got {value!r}")
    return value


def _list(
    data: Mapping[str, Any], key: str, parse: Callable[[Any], T]
) -> tuple[T, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ValueError(f"{key}: expected a list, got {type(value).__name__}")
    return tuple(parse(item) for item in value)


@dataclass(frozen=True)
class NamedResource:
    """A reference to another resource by name and URL."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        obj = _mapping(data, "named resource")
        return cls(name=_str(obj, "name"), url=_str(obj, "url"))


@dataclass(frozen=True)
class ResourceList:
    """One page of a paginated list of resources."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> ResourceList:
        obj = _mapping(data, "resource list")
        return cls(
            count=_int(obj, "count"),
            next=_optional_str(obj, "next"),
            previous=_optional_str(obj, "previous"),
            results=_list(obj, "results", NamedResource.from_dict),
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A Pokemon that can be met in a location area."""

    pokemon: NamedResource = NamedResource()

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        obj = _mapping(data, "pokemon encounter")
        return cls(pokemon=NamedResource.from_dict(obj.get("pokemon")))


@dataclass(frozen=True)
class LocationArea:
    """A location area and the Pokemon found in it."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = NamedResource()
    pokemon_encounters: tuple[PokemonEncounter, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        obj = _mapping(data, "location area")
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            game_index=_int(obj, "game_index"),
            location=NamedResource.from_dict(obj.get("location")),
            pokemon_encounters=_list(
                obj, "pokemon_encounters", PokemonEncounter.from_dict
            ),
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokemon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = NamedResource()

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        obj = _mapping(data, "pokemon stat")
        return cls(
            base_stat=_int(obj, "base_stat"),
            effort=_int(obj, "effort"),
            stat=NamedResource.from_dict(obj.get("stat")),
        )


@dataclass(frozen=True)
class PokemonTypeSlot:
    """One of a Pokemon's types, with its slot."""

    slot: int = 0
    type: NamedResource = NamedResource()

    @classmethod
    def from_dict(cls, data: Any) -> PokemonTypeSlot:
        obj = _mapping(data, "pokemon type")
        return cls(slot=_int(obj, "slot"), type=NamedResource.from_dict(obj.get("type")))


@dataclass(frozen=True)
class Pokemon:
    """The details of one Pokemon."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    is_default: bool = False
    order: int = 0
    species: NamedResource = NamedResource()
    location_area_encounters: str = ""
    stats: tuple[PokemonStat, ...] = ()
    types: tuple[PokemonTypeSlot, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        obj = _mapping(data, "pokemon")
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            base_experience=_int(obj, "base_experience"),
            height=_int(obj, "height"),
            weight=_int(obj, "weight"),
            is_default=_bool(obj, "is_default"),
            order=_int(obj, "order"),
            species=NamedResource.from_dict(obj.get("species")),
            location_area_encounters=_str(obj, "location_area_encounters"),
            stats=_list(obj, "stats", PokemonStat.from_dict),
            types=_list(obj, "types", PokemonTypeSlot.from_dict),
        )