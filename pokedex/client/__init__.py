"""Python client: HTTP wrapper and synchronized list/detail state."""
from pokedex.client.api_client import ApiClient, ApiError
from pokedex.client.sync_controller import SyncController

__all__ = ["ApiClient", "ApiError", "SyncController"]
