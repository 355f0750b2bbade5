"""Immutable HTTP status record and its constructor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

CodeT = TypeVar("CodeT", bound=int)
TextT = TypeVar("TextT", bound=str)

STATUS_KEY = "status"
STATUS_TEXT_KEY = "statusText"
PUBLIC_KEYS = (STATUS_KEY, STATUS_TEXT_KEY)
"""Field names of the public shape, mirroring HTTP response objects."""


@dataclass(frozen=True)
class HTTPStatus(Generic[CodeT, TextT]):
    """An HTTP status code paired with its reason phrase.

    Instances are frozen; assigning to any attribute raises
    ``dataclasses.FrozenInstanceError``. Attribute access uses
    ``status`` and ``status_text``, with ``statusText`` as a read-only
    alias. The record also behaves as a read-only mapping over ``status``
    and ``statusText`` (``in``, iteration, ``len`` and indexing) so it can
    be unpacked straight into response keyword arguments::

        Response(body, **NOT_FOUND)
    """

    status: CodeT
    status_text: TextT

    @property
    def code(self) -> CodeT:
        return self.status

    @property
    def phrase(self) -> TextT:
        return self.status_text

    @property
    def statusText(self) -> TextT:
        return self.status_text

    def as_response_fields(self) -> dict[str, int | str]:
        """Return the public two-field shape as a new dict."""

        return {STATUS_KEY: self.status, STATUS_TEXT_KEY: self.status_text}

    def keys(self) -> tuple[str, ...]:
        return PUBLIC_KEYS

    def __getitem__(self, key: str) -> int | str:
        if key == STATUS_KEY:
            return self.status
        if key == STATUS_TEXT_KEY:
            return self.status_text
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return key in PUBLIC_KEYS

    def __iter__(self) -> Iterator[str]:
        return iter(PUBLIC_KEYS)

    def __len__(self) -> int:
        return len(PUBLIC_KEYS)

    def __str__(self) -> str:
        return f"{self.status} {self.status_text}"


def new_http_status(status: CodeT, status_text: TextT) -> HTTPStatus[CodeT, TextT]:
    """
    Pair a status code with its reason phrase in an immutable record.

    The type variables keep the literal types of both arguments, so a
    constant declared as ``HTTPStatus[Literal[200], Literal["OK"]]`` shows the
    exact pair wherever it is used. No validation is performed.

    Args:
        status: The numeric HTTP status code.
        status_text: The reason phrase paired with ``status``.

    Returns:
        A frozen ``HTTPStatus`` exposing ``status`` and ``status_text``.
    """

    return HTTPStatus(status=status, status_text=status_text)
