"""Exception hierarchy raised by courier API clients."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import Generic
from typing import TypeVar

if TYPE_CHECKING:
    from pedidosya_courier.client.variants import ErrorVariant

VariantT = TypeVar("VariantT", bound="ErrorVariant")


def _rebuild_error(cls: type[CourierClientError], args: tuple[Any, ...], kwargs: dict[str, Any]) -> CourierClientError:
    return cls(*args, **kwargs)


class CourierClientError(RuntimeError):
    """Base error raised by courier client operations."""


class CourierTransportError(CourierClientError):
    """Raised when a request could not be sent or no response was received."""


class CourierDecodeError(CourierClientError):
    """Raised when a response body cannot be turned into the expected typed shape."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        content_type: str | None = None,
        content: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.content_type = content_type
        self.content = content

    def __reduce__(self) -> tuple[Any, ...]:
        kwargs = {"status_code": self.status_code, "content_type": self.content_type, "content": self.content}
        return (_rebuild_error, (type(self), (self.message,), kwargs), self.__dict__)


class CourierResponseError(CourierClientError, Generic[VariantT]):
    """Raised when the API answers with a documented JSON error payload.

    ``content`` always holds the raw response text, even though it was also parsed
    into ``entity``.
    """

    def __init__(self, *, status_code: int, content: str, entity: VariantT) -> None:
        super().__init__(f"Courier API responded with status {status_code} ({entity.kind})")
        self.status_code = status_code
        self.content = content
        self.entity = entity

    def __reduce__(self) -> tuple[Any, ...]:
        kwargs = {"status_code": self.status_code, "content": self.content, "entity": self.entity}
        return (_rebuild_error, (type(self), (), kwargs), self.__dict__)
