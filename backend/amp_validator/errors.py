"""Fault types raised by the validator bridge.

Validation outcomes are never raised: PASS/FAIL and individual findings are
ordinary return data. Everything here is an integration or caller error.
"""

from typing import Optional


class ValidatorBridgeError(Exception):
    """Base class for all bridge faults."""


class EngineUninitializedError(ValidatorBridgeError):
    """The validator engine was used before init() completed."""

    def __init__(self, message: str = "Validator engine is uninitialized; await init() first"):
        super().__init__(message)


class EngineLoadError(ValidatorBridgeError):
    """The configured engine loader is missing or failed."""


class CacheUrlError(ValidatorBridgeError, ValueError):
    """Attempted to validate an AMP cache URL instead of the origin document."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(
            f"Attempting to validate an AMP cache URL ({url}). "
            "Please use #development=1 on the origin URL instead."
        )


class FetchError(ValidatorBridgeError):
    """Fetching a document returned something other than HTTP 200."""

    def __init__(self, url: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url} (status {status_code})")


class MissingWirePayloadError(ValidatorBridgeError, ValueError):
    """A record has no engine wire payload, so the engine cannot render it."""
