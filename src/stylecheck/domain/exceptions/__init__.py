"""Domain exceptions."""

from stylecheck.domain.exceptions.base import StyleCheckError
from stylecheck.domain.exceptions.config import ConfigLoadError
from stylecheck.domain.exceptions.discovery import DiscoveryError, ListingCommandError
from stylecheck.domain.exceptions.registry import MalformedExceptionRecordError

__all__ = [
    "StyleCheckError",
    "ConfigLoadError",
    "DiscoveryError",
    "ListingCommandError",
    "MalformedExceptionRecordError",
]
