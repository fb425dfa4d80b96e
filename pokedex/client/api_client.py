"""HTTP client for the Pokedex API (requests)."""
import logging
import urllib.parse
from typing import List, Optional

import requests

from pokedex.config import API_BASE_URL, CLIENT_TIMEOUT_SEC, POKEMONS_PER_PAGE

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network Error"


class ApiError(Exception):
    """Failed request. message is the server's own message when it sent one."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiClient:
    """Thin wrapper over a requests-style session. Read endpoints answer {"data": ...}."""

    UA = "pokedex-client/0.1"

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        session=None,
        timeout: float = CLIENT_TIMEOUT_SEC,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": self.UA})
        self.session = session

    # --- helpers ----------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    @staticmethod
    def _error_from_response(resp) -> ApiError:
        message = None
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            message = str(body["message"])
        if not message:
            message = f"Request failed with status code {resp.status_code}"
        return ApiError(message, status_code=resp.status_code)

    def _request(self, method: str, path: str, **kwargs):
        url = self._url(path)
        logger.debug("%s %s %s", method.upper(), url, kwargs.get("params") or "")
        try:
            resp = getattr(self.session, method)(url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method.upper(), url, e)
            raise ApiError(NETWORK_ERROR_MESSAGE) from e
        if not 200 <= resp.status_code < 300:
            raise self._error_from_response(resp)
        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(
                f"Invalid response from {path}", status_code=resp.status_code
            ) from e

    # --- endpoints --------------------------------------------------

    def list_pokemons(self, page: int = 1, limit: int = POKEMONS_PER_PAGE) -> List[dict]:
        body = self._request("get", "/pokemons", params={"page": page, "limit": limit})
        return body["data"]

    def search_pokemons(self, term: str) -> List[dict]:
        body = self._request("get", "/pokemons/search", params={"name": term})
        return body["data"]

    def filter_pokemons_by_type(self, type_: str) -> List[dict]:
        body = self._request("get", f"/pokemons/type/{urllib.parse.quote(type_, safe='')}")
        return body["data"]

    def get_pokemon(self, pokemon_id) -> dict:
        """Return {"pokemon", "nextPokemon", "previousPokemon"}."""
        body = self._request("get", f"/pokemons/{pokemon_id}")
        return body["data"]

    def create_pokemon(self, name: str, pokemon_id, url: str, types: List[str]) -> dict:
        return self._request(
            "post",
            "/pokemons",
            json={"name": name, "id": pokemon_id, "url": url, "types": types},
        )
