"""Request descriptors, result types and error tables for the lobby protocol.

This module performs no I/O. Commands build a ``RequestDescriptor`` and hand it
to ``connection.execute``, which turns the server response into exactly one of
``Success``, ``KnownFailure`` or ``UnknownFailure``.

Command envelope convention: state-changing actions POST to ``/lobbies/{code}``
with a single JSON object ``{"command": name, "secret": {...}, **args}``; the
command arguments are merged at the top level next to ``command`` and
``secret``.
"""

from __future__ import annotations

import json
from dataclasses import InitVar, dataclass, field
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar, Union
from urllib.parse import quote

from .models import PlayerSecret

T = TypeVar("T")
E = TypeVar("E", bound="KnownError")

ERROR_TAG_FIELD = "error"
RESERVED_ENVELOPE_KEYS = frozenset({"command", "secret"})

UNKNOWN_TRANSPORT = "transport"
UNKNOWN_MALFORMED_BODY = "malformed-body"
UNKNOWN_UNEXPECTED_ERROR = "unexpected-error"


class KnownError:
    """Base class for every server error a command anticipates."""


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class KnownFailure(Generic[E]):
    error: E


@dataclass(frozen=True)
class UnknownFailure:
    reason: str
    message: str
    status: int | None = None
    body: str | None = None


Result = Union[Success[T], KnownFailure[E], UnknownFailure]


@dataclass(frozen=True)
class ErrorCase(Generic[E]):
    status: int
    tag: str
    decode: Callable[[dict[str, Any]], E]

    def matches(self, status: int, tag: str) -> bool:
        return self.status == status and self.tag == tag


def error_case(status: int, tag: str, variant: Callable[[], E]) -> ErrorCase[E]:
    """Table entry for a variant that carries no structured payload."""
    return ErrorCase(status, tag, lambda _payload: variant())


class ErrorTable(Generic[E]):
    """Ordered, exact-match mapping of ``(status, tag)`` to error variants."""

    def __init__(self, cases: Iterable[ErrorCase[E]] = ()):
        self._cases = tuple(cases)
        seen: set[tuple[int, str]] = set()
        for case in self._cases:
            key = (case.status, case.tag)
            if key in seen:
                raise ValueError(f"Duplicate error table entry: {key}")
            seen.add(key)

    def __iter__(self) -> Iterator[ErrorCase[E]]:
        return iter(self._cases)

    def __len__(self) -> int:
        return len(self._cases)

    def __repr__(self) -> str:
        pairs = ", ".join(f"({case.status}, {case.tag!r})" for case in self._cases)
        return f"ErrorTable([{pairs}])"

    def match(self, status: int, tag: str) -> ErrorCase[E] | None:
        for case in self._cases:
            if case.matches(status, tag):
                return case
        return None


NO_ERRORS: ErrorTable[Any] = ErrorTable()


@dataclass(frozen=True)
class RequestDescriptor(Generic[T, E]):
    """One call to make. The body is encoded when the descriptor is built."""

    method: str
    path: str
    body: InitVar[Any]
    errors: ErrorTable[E]
    decode: Callable[[Any], T]
    payload: bytes | None = field(init=False)

    def __post_init__(self, body: Any) -> None:
        payload = None if body is None else json.dumps(body, separators=(",", ":")).encode()
        object.__setattr__(self, "payload", payload)

    def encode_body(self) -> bytes | None:
        return self.payload

    def json_body(self) -> Any:
        return None if self.payload is None else json.loads(self.payload)


def lobby_path(code: str, *parts: str) -> str:
    segments = ["lobbies", quote(code, safe="")]
    segments.extend(parts)
    return "/" + "/".join(segments)


def encode_command(name: str, secret: PlayerSecret, /, **args: Any) -> dict[str, Any]:
    clashing = RESERVED_ENVELOPE_KEYS.intersection(args)
    if clashing:
        raise ValueError(f"Command arguments may not use reserved keys: {sorted(clashing)}")
    envelope: dict[str, Any] = {"command": name, "secret": secret.encode()}
    envelope.update(args)
    return envelope


def command_request(
    code: str,
    name: str,
    secret: PlayerSecret,
    errors: ErrorTable[E],
    decode: Callable[[Any], T],
    /,
    **args: Any,
) -> RequestDescriptor[T, E]:
    return RequestDescriptor(
        method="POST",
        path=lobby_path(code),
        body=encode_command(name, secret, **args),
        errors=errors,
        decode=decode,
    )
