# src/errors.py

"""Exception types raised by the catalog pipeline."""


class CatalogError(Exception):
    """Base class for gold_catalog errors."""


class UpstreamUnavailable(CatalogError):
    """The gold price feed failed and no cached quote can stand in."""


class InvalidQueryParameter(CatalogError, ValueError):
    """A numeric query parameter could not be parsed."""

    def __init__(self, name: str, raw: str) -> None:
        super().__init__(f"Invalid value for {name}: {raw!r}")
        self.name = name
        self.raw = raw
