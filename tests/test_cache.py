import io
import time

import pytest

from pokedexcli.cache import Cache


@pytest.mark.parametrize(
    ("key", "val"),
    [
        ("https://pokeapi.co/api/v2", b"Sample Data"),
        ("https://pokeapi.co/api/v2/location-area", b"Example Data"),
    ],
)
def test_add_get(key, val):
    with Cache(5) as cache:
        cache.add(key, val)
        assert cache.get(key) == val


def test_reap_loop():
    key = "https://pokeapi.co/api/v2/location-area?offset=20&limit=20"
    with Cache(0.005) as cache:
        cache.add(key, b"Testing Data")
        assert cache.get(key) == b"Testing Data"
        time.sleep(0.1)
        assert cache.get(key) is None


def test_get_missing_key_returns_none():
    with Cache(5) as cache:
        assert cache.get("absent") is None


def test_add_replaces_existing_value():
    with Cache(5) as cache:
        cache.add("k", b"first")
        cache.add("k", b"second")
        assert cache.get("k") == b"second"
        assert len(cache) == 1


def test_reap_keeps_fresh_and_drops_old_entries():
    cache = Cache(0.02)
    cache.close()
    cache.add("old", b"data")
    assert cache.reap() == 0
    assert "old" in cache
    time.sleep(0.05)
    cache.add("new", b"data")
    assert cache.reap() == 1
    assert cache.get("old") is None
    assert cache.get("new") == b"data"


def test_dump_writes_every_entry():
    with Cache(5) as cache:
        cache.add("a", b"Sample Data")
        out = io.StringIO()
        cache.dump(out)
        assert out.getvalue() == "key: a - val: Sample Data\n\n"


@pytest.mark.parametrize("interval", [0, -1])
def test_non_positive_interval_is_rejected(interval):
    with pytest.raises(ValueError):
        Cache(interval)