"""jolpica_f1 — Typed Python client for the Jolpica (Ergast-compatible) F1 API."""

from jolpica_f1._retry import RetryPolicy
from jolpica_f1.client import AsyncJolpicaClient, JolpicaClient
from jolpica_f1.exceptions import (
    JolpicaAPIError,
    JolpicaConnectionError,
    JolpicaError,
    JolpicaRateLimitError,
    JolpicaTimeoutError,
    JolpicaTransportError,
    JolpicaValidationError,
    TransientSourceError,
)
from jolpica_f1.models.standings import StandingsType

__all__ = [
    "AsyncJolpicaClient",
    "JolpicaAPIError",
    "JolpicaClient",
    "JolpicaConnectionError",
    "JolpicaError",
    "JolpicaRateLimitError",
    "JolpicaTimeoutError",
    "JolpicaTransportError",
    "JolpicaValidationError",
    "RetryPolicy",
    "StandingsType",
    "TransientSourceError",
]

__version__ = "0.1.0"
