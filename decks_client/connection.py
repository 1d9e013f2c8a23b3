"""HTTP executor and client for the card game lobby server."""

from __future__ import annotations

import http.client
import json
import logging
from typing import Any, Protocol, Sequence

from . import commands, errors
from .config import ClientConfig
from .decoders import DecodeError
from .models import Lobby, LobbyAndHand, PlayerSecret
from .protocol import (
    ERROR_TAG_FIELD,
    UNKNOWN_MALFORMED_BODY,
    UNKNOWN_TRANSPORT,
    UNKNOWN_UNEXPECTED_ERROR,
    KnownFailure,
    RequestDescriptor,
    Result,
    Success,
    UnknownFailure,
)

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def send(self, method: str, path: str, body: bytes | None) -> tuple[int, bytes]:
        ...


class HTTPTransport:
    """Performs one HTTP exchange per call on a fresh connection."""

    def __init__(self, config: ClientConfig):
        self.config = config

    def send(self, method: str, path: str, body: bytes | None) -> tuple[int, bytes]:
        connection_cls = http.client.HTTPSConnection if self.config.tls else http.client.HTTPConnection
        conn = connection_cls(self.config.host, self.config.port, timeout=self.config.timeout)
        headers = {"Accept": "application/json"}
        if body is not None:
            headers["Content-Type"] = "application/json"
        try:
            conn.request(method, self.config.url_for(path), body=body, headers=headers)
            response = conn.getresponse()
            return response.status, response.read()
        finally:
            conn.close()


def _parse_json(raw: bytes) -> Any:
    text = raw.decode().strip()
    if not text:
        return None
    return json.loads(text)


def _preview(raw: bytes) -> str:
    return raw.decode(errors="replace")


def execute(descriptor: RequestDescriptor, transport: Transport) -> Result:
    try:
        status, raw = transport.send(descriptor.method, descriptor.path, descriptor.encode_body())
    except (OSError, http.client.HTTPException) as exc:
        logger.warning("%s %s failed: %s", descriptor.method, descriptor.path, exc)
        return UnknownFailure(UNKNOWN_TRANSPORT, f"Request failed: {exc}")

    logger.debug("%s %s -> %s", descriptor.method, descriptor.path, status)

    try:
        data = _parse_json(raw)
    except (ValueError, RecursionError) as exc:
        return _unknown(descriptor, UNKNOWN_MALFORMED_BODY, f"Invalid server JSON: {exc}", status, raw)

    if 200 <= status < 300:
        try:
            return Success(descriptor.decode(data))
        except DecodeError as exc:
            return _unknown(descriptor, UNKNOWN_MALFORMED_BODY, f"Unexpected response shape: {exc}", status, raw)

    tag = data.get(ERROR_TAG_FIELD) if isinstance(data, dict) else None
    if not isinstance(tag, str):
        return _unknown(descriptor, UNKNOWN_UNEXPECTED_ERROR, "Error response without a tag", status, raw)

    case = descriptor.errors.match(status, tag)
    if case is None:
        return _unknown(descriptor, UNKNOWN_UNEXPECTED_ERROR, f"Unexpected error {status} {tag!r}", status, raw)

    try:
        return KnownFailure(case.decode(data))
    except DecodeError as exc:
        return _unknown(descriptor, UNKNOWN_UNEXPECTED_ERROR, f"Malformed {tag!r} error: {exc}", status, raw)


def _unknown(descriptor: RequestDescriptor, reason: str, message: str, status: int, raw: bytes) -> UnknownFailure:
    logger.warning("%s %s: %s", descriptor.method, descriptor.path, message)
    return UnknownFailure(reason, message, status=status, body=_preview(raw))


class DecksClient:
    """Thin JSON-over-HTTP client for the lobby protocol.

    Holds only configuration, so one instance can be shared between threads.
    """

    def __init__(
        self,
        host: str = "127.0.0.1",
        port: int = 8080,
        timeout: float = 10.0,
        *,
        tls: bool = False,
        base_path: str = "",
        transport: Transport | None = None,
    ):
        self.config = ClientConfig(host=host, port=port, timeout=timeout, tls=tls, base_path=base_path)
        self.transport = transport or HTTPTransport(self.config)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "DecksClient":
        return cls(config.host, config.port, config.timeout, tls=config.tls, base_path=config.base_path)

    def request(self, descriptor: RequestDescriptor) -> Result:
        return execute(descriptor, self.transport)

    def create_lobby(self) -> Result[Lobby, Any]:
        return self.request(commands.create_lobby())

    def new_player(self, code: str, name: str) -> Result[PlayerSecret, errors.NewPlayerError]:
        return self.request(commands.new_player(code, name))

    def new_ai(self, code: str) -> Result[None, Any]:
        return self.request(commands.new_ai(code))

    def get_lobby_and_hand(self, code: str, secret: PlayerSecret) -> Result[LobbyAndHand, Any]:
        return self.request(commands.get_lobby_and_hand(code, secret))

    def add_deck(self, code: str, secret: PlayerSecret, deck_id: str) -> Result[LobbyAndHand, errors.AddDeckError]:
        return self.request(commands.add_deck(code, secret, deck_id))

    def new_game(self, code: str, secret: PlayerSecret) -> Result[LobbyAndHand, errors.NewGameError]:
        return self.request(commands.new_game(code, secret))

    def choose(self, code: str, secret: PlayerSecret, winner: int) -> Result[LobbyAndHand, errors.ChooseError]:
        return self.request(commands.choose(code, secret, winner))

    def play(self, code: str, secret: PlayerSecret, ids: Sequence[int]) -> Result[LobbyAndHand, errors.PlayError]:
        return self.request(commands.play(code, secret, ids))

    def skip(self, code: str, secret: PlayerSecret, players: Sequence[int]) -> Result[LobbyAndHand, errors.SkipError]:
        return self.request(commands.skip(code, secret, players))

    def back(self, code: str, secret: PlayerSecret) -> Result[LobbyAndHand, Any]:
        return self.request(commands.back(code, secret))
