from collections.abc import Iterator

import pytest
import respx

from chronosclient import client as client_module
from chronosclient.client import ChronosClient

BASE_URL = "http://chronos.test"


@pytest.fixture(autouse=True)
def reset_default_client() -> Iterator[None]:
    """Drop the process-default client between tests.

    The default client owns a card cache; sharing it across tests would
    let one test's resolved cards satisfy another test's lookups.
    """
    client_module.reset_chronos_client()
    yield
    client_module.reset_chronos_client()


@pytest.fixture
def api_mock() -> Iterator[respx.MockRouter]:
    """Mocked backend; routes are relative to BASE_URL."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def client() -> ChronosClient:
    """Fresh client (and fresh card cache) per test."""
    return ChronosClient(base_url=BASE_URL)


@pytest.fixture
def raw_card_catalog() -> list[dict]:
    """Full card catalog as served by GET /game/cards."""
    return [
        {
            "code": "C01",
            "name": "Ember Fox",
            "description": "Quick and hot.",
            "imageUrl": "/cards/c01.png",
            "damage": 3,
            "heal": 0,
            "fire": 7,
            "might": 2,
            "magic": 4,
            "number": 1,
        },
        {
            "code": "C02",
            "name": "Stone Warden",
            "description": None,
            "imageUrl": "/cards/c02.png",
            "damage": 1,
            "heal": 2,
            "fire": 1,
            "might": 8,
            "magic": 2,
            "cardNumber": "2",
        },
        {
            "code": "C03",
            "name": "Moon Sage",
            "imageUrl": "/cards/c03.png",
            "heal": 4,
            "magic": 9,
            "meta": {"number": 3},
        },
    ]
