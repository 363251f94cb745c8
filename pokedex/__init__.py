"""Interactive command-line Pokedex backed by PokeAPI, with an expiring cache and API client."""

__version__ = "0.1.0"
__all__ = ["api", "cache", "cli"]