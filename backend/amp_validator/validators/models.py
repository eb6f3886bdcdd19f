"""Validation models: plain, string-keyed views of engine results.

Enum fields hold names, not numbers. Each record also carries the engine's
original wire bytes as a private attribute: it never shows up in
model_dump() or field iteration, and is only used to replay rendering
through the engine.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr


class WireRecord(BaseModel):
    """Frozen record bound, at most once, to the engine bytes it came from."""

    model_config = {"frozen": True, "populate_by_name": True}

    _wire_payload: Optional[bytes] = PrivateAttr(default=None)

    @classmethod
    def with_wire_payload(cls, payload: bytes, **fields):
        """Build a record bound to the given wire bytes."""
        record = cls(**fields)
        record._wire_payload = payload
        return record

    @property
    def wire_payload(self) -> Optional[bytes]:
        return self._wire_payload

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_wire_payload" and self._wire_payload is not None:
            raise AttributeError("wire payload is set once at construction")
        super().__setattr__(name, value)


class ValidationError(WireRecord):
    """A single engine finding, bound to the bytes of that error alone."""

    severity: Optional[str] = None  # None when the engine number is unknown
    code: Optional[str] = None
    params: tuple[str, ...] = ()
    line: Optional[int] = None
    col: Optional[int] = None
    spec_url: Optional[str] = Field(default=None, alias="specUrl")


class ValidationResult(WireRecord):
    """Outcome of one engine validation run, errors in engine order."""

    status: Optional[str] = None
    errors: tuple[ValidationError, ...] = ()

    @property
    def passed(self) -> bool:
        return self.status == "PASS"

    def to_plain(self) -> dict:
        """Plain dict form with wire-style keys (``specUrl``)."""
        return self.model_dump(by_alias=True, mode="json")
