"""Catalog errors; each carries the HTTP status the API maps it to."""


class PokedexError(Exception):
    """Base error for catalog reads and writes."""
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingFields(PokedexError):
    def __init__(self, message: str = "Missing required data.") -> None:
        super().__init__(message)


class InvalidTypeCount(PokedexError):
    def __init__(self, message: str = "Pokémon can only have one or two types.") -> None:
        super().__init__(message)


class InvalidTypeValue(PokedexError):
    def __init__(self, message: str = "Pokémon's type is invalid.") -> None:
        super().__init__(message)


class DuplicatePokemon(PokedexError):
    def __init__(self, message: str = "The Pokémon already exists.") -> None:
        super().__init__(message)


class InvalidArgument(PokedexError):
    """Bad query argument (blank search term, missing type, page < 1)."""


class PokemonNotFound(PokedexError):
    status_code = 404

    def __init__(self, pokemon_id) -> None:
        super().__init__(f"Pokemon with id {pokemon_id} not found")
        self.pokemon_id = pokemon_id


class StoreUnavailable(PokedexError):
    """Data file exists but cannot be read back intact; writes must not proceed."""
    status_code = 503
