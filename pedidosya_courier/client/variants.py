"""Typed error variants built from the courier API error envelope.

Each operation documents a closed set of failure statuses. A variant is one of:

* ``Status<code>`` for a documented status, carrying the envelope;
* ``StatusNonExpected`` for any other (or missing) status, carrying the envelope;
* ``UnknownValue`` when the error body is JSON but not an envelope, carrying the raw value.
"""

from __future__ import annotations

from typing import Any
from typing import ClassVar
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError

from pedidosya_courier.schemas.error import HttpErrorResponse

STATUS_NON_EXPECTED = "StatusNonExpected"
UNKNOWN_VALUE = "UnknownValue"

VariantT = TypeVar("VariantT", bound="ErrorVariant")


class ErrorVariant(BaseModel):
    """One case of an operation's error variant set."""

    model_config = ConfigDict(frozen=True)

    documented_statuses: ClassVar[frozenset[int]] = frozenset()

    kind: str
    envelope: HttpErrorResponse | None = None
    raw: Any = None

    @classmethod
    def from_envelope(cls: type[VariantT], envelope: HttpErrorResponse) -> VariantT:
        """Select the variant matching the envelope ``status`` field."""
        if envelope.status is not None and envelope.status in cls.documented_statuses:
            return cls(kind=f"Status{envelope.status}", envelope=envelope)
        return cls(kind=STATUS_NON_EXPECTED, envelope=envelope)

    @classmethod
    def from_json(cls: type[VariantT], value: Any) -> VariantT:
        """Build a variant from any decoded JSON value without raising."""
        try:
            envelope = HttpErrorResponse.model_validate(value)
        except ValidationError:
            return cls(kind=UNKNOWN_VALUE, raw=value)
        return cls.from_envelope(envelope)

    @property
    def status(self) -> int | None:
        return self.envelope.status if self.envelope is not None else None

    @property
    def message(self) -> str | None:
        return self.envelope.message if self.envelope is not None else None

    @property
    def code(self) -> str | None:
        return self.envelope.code if self.envelope is not None else None

    @property
    def is_documented(self) -> bool:
        return self.kind not in (STATUS_NON_EXPECTED, UNKNOWN_VALUE)

    @property
    def is_unexpected(self) -> bool:
        return self.kind == STATUS_NON_EXPECTED

    @property
    def is_unknown(self) -> bool:
        return self.kind == UNKNOWN_VALUE


class EstimateShippingError(ErrorVariant):
    documented_statuses: ClassVar[frozenset[int]] = frozenset({400, 403, 500})


class ConfirmShippingError(ErrorVariant):
    documented_statuses: ClassVar[frozenset[int]] = frozenset({400, 403, 409, 500})


class WebhooksConfigurationError(ErrorVariant):
    documented_statuses: ClassVar[frozenset[int]] = frozenset({400, 403, 500})
