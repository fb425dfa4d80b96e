"""Client-side list/detail state kept in sync with the Pokedex API.

The list state is driven by named events:

- ``query_started(mode, page)``: loading on, error cleared. A search or type
  query at page 1 starts from an empty list.
- ``query_succeeded(items)``: loading off. A search or type query at page 1
  replaces the list; anything else (plain pagination, or a search/type query
  past page 1) appends to it.
- ``query_failed(message)``: loading off, error message kept.
- ``page_advanced(page=None)``: jump to ``page`` or move to the next page.
- ``search_term_changed(term)`` / ``type_changed(type_)``: update the query
  fields only. Callers reset the page to 1 before the next query.

The ``load_*`` / ``add_pokemon`` methods issue the HTTP call through an
``ApiClient`` and feed the outcome back in as events. A response that arrives
after a newer query was started is still applied.
"""
import logging
import threading
import time
from typing import List, Optional

from pokedex.client.api_client import ApiClient, ApiError
from pokedex.config import CLIENT_LOADING_DELAY_SEC, POKEMONS_PER_PAGE
from pokedex.models.client_state import DetailState, ListState, QueryMode

logger = logging.getLogger(__name__)

_RESETTING_MODES = ("search", "type")


class SyncController:
    """Owns ListState and DetailState; thread-safe for background loads."""

    def __init__(
        self,
        api: Optional[ApiClient] = None,
        page_size: int = POKEMONS_PER_PAGE,
        loading_delay: float = CLIENT_LOADING_DELAY_SEC,
    ) -> None:
        self.api = api if api is not None else ApiClient()
        self.page_size = page_size
        self.loading_delay = loading_delay
        self.state = ListState()
        self.detail = DetailState()
        self._lock = threading.Lock()

    # --- events -----------------------------------------------------

    def query_started(self, mode: QueryMode, page: int) -> None:
        with self._lock:
            self.state.loading = True
            self.state.error_message = ""
            self.state.mode = mode
            self.state.page = page
            if mode in _RESETTING_MODES and page == 1:
                self.state.items = []

    def query_succeeded(self, items: List[dict]) -> None:
        with self._lock:
            self.state.loading = False
            if self.state.mode in _RESETTING_MODES and self.state.page == 1:
                self.state.items = list(items)
            else:
                self.state.items = self.state.items + list(items)

    def query_failed(self, message: str) -> None:
        with self._lock:
            self.state.loading = False
            self.state.error_message = message

    def page_advanced(self, page: Optional[int] = None) -> None:
        with self._lock:
            if page is not None:
                self.state.page = page
            else:
                self.state.page += 1

    def search_term_changed(self, term: str) -> None:
        with self._lock:
            self.state.search = term

    def type_changed(self, type_: str) -> None:
        with self._lock:
            self.state.type = type_

    # --- queries ----------------------------------------------------

    def current_mode(self) -> QueryMode:
        """Type filter wins over name search, which wins over plain pagination."""
        if self.state.type:
            return "type"
        if self.state.search:
            return "search"
        return "page"

    def _pause(self) -> None:
        if self.loading_delay > 0:
            time.sleep(self.loading_delay)

    def load_pokemons(self) -> List[dict]:
        """Run one list query for the current page/search/type and merge the result."""
        with self._lock:
            mode = self.current_mode()
            page = self.state.page
            search = self.state.search
            type_ = self.state.type
        self.query_started(mode, page)
        try:
            if mode == "type":
                items = self.api.filter_pokemons_by_type(type_)
            elif mode == "search":
                items = self.api.search_pokemons(search)
            else:
                items = self.api.list_pokemons(page=page, limit=self.page_size)
            self._pause()
        except ApiError as e:
            logger.info("Loading pokemons failed: %s", e.message)
            self.query_failed(e.message)
            return list(self.state.items)
        self.query_succeeded(items)
        return list(self.state.items)

    def load_pokemons_async(self) -> threading.Thread:
        """load_pokemons on a daemon thread; join the returned thread to wait."""
        t = threading.Thread(target=self.load_pokemons, daemon=True)
        t.start()
        return t

    def load_more(self) -> List[dict]:
        self.page_advanced()
        return self.load_pokemons()

    def apply_search(self, term: str) -> List[dict]:
        """New name search from the first page."""
        self.search_term_changed(term)
        self.page_advanced(1)
        return self.load_pokemons()

    def apply_type(self, type_: str) -> List[dict]:
        """New type filter from the first page."""
        self.type_changed(type_)
        self.page_advanced(1)
        return self.load_pokemons()

    def load_pokemon(self, pokemon_id) -> DetailState:
        """Fetch one pokemon with its neighbors into self.detail."""
        with self._lock:
            self.state.loading = True
            self.state.error_message = ""
        try:
            data = self.api.get_pokemon(pokemon_id)
        except ApiError as e:
            self.query_failed(e.message)
            return self.detail
        with self._lock:
            self.state.loading = False
            self.detail = DetailState(
                pokemon=data.get("pokemon"),
                next_pokemon=data.get("nextPokemon"),
                previous_pokemon=data.get("previousPokemon"),
            )
        return self.detail

    def add_pokemon(self, name: str, pokemon_id, url: str, types: List[str]) -> Optional[dict]:
        """Create a pokemon. Returns its display form, or None with error_message set."""
        with self._lock:
            self.state.loading = True
            self.state.error_message = ""
        try:
            created = self.api.create_pokemon(name, pokemon_id, url, types)
        except ApiError as e:
            self.query_failed(e.message)
            return None
        with self._lock:
            self.state.loading = False
        return created
