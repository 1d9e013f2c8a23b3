"""Data contracts returned by the game server.

Only the fields the client reads are modelled; nested structures owned by the
server (lobby configuration, round state) are kept as plain JSON mappings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .decoders import as_bool, as_int, as_list, as_object, as_str, optional_object


@dataclass(frozen=True)
class PlayerSecret:
    """Opaque per-player token issued when joining a lobby."""

    player_id: int
    secret: str = field(repr=False)

    def encode(self) -> dict[str, Any]:
        return {"id": self.player_id, "secret": self.secret}


@dataclass(frozen=True)
class Player:
    id: int
    name: str
    status: str
    score: int
    disconnected: bool = False
    left: bool = False


@dataclass(frozen=True)
class Lobby:
    game_code: str
    owner: int
    players: tuple[Player, ...]
    config: dict[str, Any] = field(default_factory=dict)
    game: dict[str, Any] | None = None

    def player(self, player_id: int) -> Player | None:
        for player in self.players:
            if player.id == player_id:
                return player
        return None


@dataclass(frozen=True)
class Card:
    id: str
    text: str


@dataclass(frozen=True)
class LobbyAndHand:
    lobby: Lobby
    hand: tuple[Card, ...]


def decode_unit(value: Any) -> None:
    return None


def decode_player_secret(value: Any) -> PlayerSecret:
    payload = as_object(value, "player secret")
    return PlayerSecret(player_id=as_int(payload, "id"), secret=as_str(payload, "secret"))


def decode_player(value: Any) -> Player:
    payload = as_object(value, "player")
    return Player(
        id=as_int(payload, "id"),
        name=as_str(payload, "name"),
        status=as_str(payload, "status"),
        score=as_int(payload, "score"),
        disconnected=as_bool(payload, "disconnected", default=False),
        left=as_bool(payload, "left", default=False),
    )


def decode_lobby(value: Any) -> Lobby:
    payload = as_object(value, "lobby")
    return Lobby(
        game_code=as_str(payload, "gameCode"),
        owner=as_int(payload, "owner"),
        players=tuple(decode_player(item) for item in as_list(payload, "players")),
        config=optional_object(payload, "config") or {},
        game=optional_object(payload, "game"),
    )


def decode_card(value: Any) -> Card:
    payload = as_object(value, "card")
    return Card(id=as_str(payload, "id"), text=as_str(payload, "text"))


def decode_lobby_and_hand(value: Any) -> LobbyAndHand:
    payload = as_object(value, "lobby and hand")
    hand = as_object(payload.get("hand"), "'hand'")
    return LobbyAndHand(
        lobby=decode_lobby(payload.get("lobby")),
        hand=tuple(decode_card(item) for item in as_list(hand, "hand")),
    )
