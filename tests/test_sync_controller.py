# tests/test_sync_controller.py
from __future__ import annotations

import pytest
import requests

from pokedex.client.api_client import NETWORK_ERROR_MESSAGE, ApiClient, ApiError
from pokedex.client.sync_controller import SyncController


class DownSession:
    """Session whose every call fails at the transport level."""

    def get(self, url, **kwargs):
        raise requests.ConnectionError("connection refused")

    post = get


@pytest.fixture()
def controller(client):
    # TestClient speaks the same get/post/json API as requests.Session
    return SyncController(api=ApiClient(base_url="", session=client), page_size=2, loading_delay=0)


# --- pure state transitions ---------------------------------------------------

def offline_controller() -> SyncController:
    return SyncController(api=ApiClient(base_url="", session=DownSession()), loading_delay=0)


def test_search_first_page_replaces_items():
    c = offline_controller()
    c.state.items = [{"id": 1}, {"id": 2}, {"id": 3}]

    c.query_started("search", 1)
    assert c.state.loading is True
    assert c.state.items == []
    c.query_succeeded([{"id": 10}, {"id": 11}])

    assert c.state.loading is False
    assert c.state.items == [{"id": 10}, {"id": 11}]


def test_plain_page_appends():
    c = offline_controller()
    c.state.items = [{"id": 1}]

    c.query_started("page", 2)
    assert c.state.items == [{"id": 1}]
    c.query_succeeded([{"id": 3}])

    assert c.state.items == [{"id": 1}, {"id": 3}]


def test_plain_first_page_also_appends():
    c = offline_controller()
    c.state.items = [{"id": 1}]
    c.query_started("page", 1)
    c.query_succeeded([{"id": 2}])
    assert c.state.items == [{"id": 1}, {"id": 2}]


def test_type_filter_past_first_page_appends():
    c = offline_controller()
    c.state.items = [{"id": 1}]
    c.query_started("type", 2)
    c.query_succeeded([{"id": 2}])
    assert c.state.items == [{"id": 1}, {"id": 2}]


def test_failure_keeps_items_and_sets_message():
    c = offline_controller()
    c.state.items = [{"id": 1}]
    c.query_started("page", 2)
    c.query_failed("boom")
    assert c.state.loading is False
    assert c.state.error_message == "boom"
    assert c.state.items == [{"id": 1}]

    c.query_started("page", 3)
    assert c.state.error_message == ""


def test_page_advanced_and_term_changes_do_not_reset_page():
    c = offline_controller()
    c.page_advanced()
    c.page_advanced()
    assert c.state.page == 3
    c.page_advanced(7)
    assert c.state.page == 7

    c.search_term_changed("pika")
    c.type_changed("fire")
    assert c.state.page == 7
    assert (c.state.search, c.state.type) == ("pika", "fire")


def test_mode_precedence():
    c = offline_controller()
    assert c.current_mode() == "page"
    c.search_term_changed("pika")
    assert c.current_mode() == "search"
    c.type_changed("fire")
    assert c.current_mode() == "type"


def test_network_failure_surfaces_generic_message():
    c = offline_controller()
    items = c.load_pokemons()
    assert items == []
    assert c.state.loading is False
    assert c.state.error_message == NETWORK_ERROR_MESSAGE


# --- against the API ----------------------------------------------------------

def test_load_more_accumulates_pages(controller):
    assert [p["id"] for p in controller.load_pokemons()] == [1, 2]
    assert [p["id"] for p in controller.load_more()] == [1, 2, 4, 25]
    assert [p["id"] for p in controller.load_more()] == [1, 2, 4, 25, 81]
    assert controller.state.page == 3
    assert controller.state.error_message == ""


def test_search_then_type_reset_the_list(controller):
    controller.load_pokemons()
    controller.load_more()

    assert [p["name"] for p in controller.apply_search("saur")] == ["Bulbasaur", "Ivysaur"]
    assert controller.state.mode == "search"
    assert controller.state.page == 1

    assert [p["name"] for p in controller.apply_type("electric")] == ["Pikachu", "Magnemite"]
    assert controller.state.mode == "type"


def test_server_message_is_shown_verbatim(controller):
    controller.apply_search("   ")
    assert controller.state.error_message == "Search term is required"


def test_background_load(controller):
    t = controller.load_pokemons_async()
    t.join(timeout=5)
    assert not t.is_alive()
    assert [p["id"] for p in controller.state.items] == [1, 2]
    assert controller.state.loading is False


def test_load_pokemon_detail(controller):
    detail = controller.load_pokemon(25)
    assert detail.pokemon["name"] == "Pikachu"
    assert detail.next_pokemon["name"] == "Magnemite"
    assert detail.previous_pokemon["name"] == "Charmander"

    controller.load_pokemon(999)
    assert controller.state.error_message == "Pokemon with id 999 not found"
    assert controller.detail.pokemon["name"] == "Pikachu"


def test_add_pokemon(controller):
    created = controller.add_pokemon("Eevee", 133, "/images/eevee.png", ["normal"])
    assert created["name"] == "Eevee"
    assert controller.state.loading is False

    assert controller.add_pokemon("Eevee", 134, "/images/eevee.png", ["normal"]) is None
    assert controller.state.error_message == "The Pokémon already exists."


def test_api_error_without_message_uses_status(client):
    api = ApiClient(base_url="", session=client)
    with pytest.raises(ApiError) as err:
        api._request("get", "/nowhere")
    assert err.value.status_code == 404
    assert err.value.message == "Request failed with status code 404"


def test_badly_typed_create_shows_server_message(controller):
    assert controller.add_pokemon("Eevee", 133, 5, ["normal"]) is None
    assert controller.state.error_message.startswith("Invalid url")
