"""One request builder per server action. Nothing here touches the network."""

from __future__ import annotations

from typing import Any, Sequence

from . import errors
from .models import (
    Lobby,
    LobbyAndHand,
    PlayerSecret,
    decode_lobby,
    decode_lobby_and_hand,
    decode_player_secret,
    decode_unit,
)
from .protocol import NO_ERRORS, RequestDescriptor, command_request, lobby_path


def create_lobby() -> RequestDescriptor[Lobby, Any]:
    return RequestDescriptor("POST", "/lobbies", None, NO_ERRORS, decode_lobby)


def new_player(code: str, name: str) -> RequestDescriptor[PlayerSecret, errors.NewPlayerError]:
    return RequestDescriptor(
        "POST",
        lobby_path(code, "players"),
        {"name": name},
        errors.NEW_PLAYER_ERRORS,
        decode_player_secret,
    )


def new_ai(code: str) -> RequestDescriptor[None, Any]:
    return RequestDescriptor("POST", lobby_path(code, "players", "newAi"), None, NO_ERRORS, decode_unit)


def get_lobby_and_hand(code: str, secret: PlayerSecret) -> RequestDescriptor[LobbyAndHand, Any]:
    return command_request(code, "getLobbyAndHand", secret, NO_ERRORS, decode_lobby_and_hand)


def add_deck(code: str, secret: PlayerSecret, deck_id: str) -> RequestDescriptor[LobbyAndHand, errors.AddDeckError]:
    return command_request(code, "addDeck", secret, errors.ADD_DECK_ERRORS, decode_lobby_and_hand, deckId=deck_id)


def new_game(code: str, secret: PlayerSecret) -> RequestDescriptor[LobbyAndHand, errors.NewGameError]:
    return command_request(code, "newGame", secret, errors.NEW_GAME_ERRORS, decode_lobby_and_hand)


def choose(code: str, secret: PlayerSecret, winner: int) -> RequestDescriptor[LobbyAndHand, errors.ChooseError]:
    return command_request(code, "choose", secret, errors.CHOOSE_ERRORS, decode_lobby_and_hand, winner=winner)


def play(code: str, secret: PlayerSecret, ids: Sequence[int]) -> RequestDescriptor[LobbyAndHand, errors.PlayError]:
    return command_request(code, "play", secret, errors.PLAY_ERRORS, decode_lobby_and_hand, ids=list(ids))


def skip(code: str, secret: PlayerSecret, players: Sequence[int]) -> RequestDescriptor[LobbyAndHand, errors.SkipError]:
    return command_request(code, "skip", secret, errors.SKIP_ERRORS, decode_lobby_and_hand, players=list(players))


def back(code: str, secret: PlayerSecret) -> RequestDescriptor[LobbyAndHand, Any]:
    return command_request(code, "back", secret, NO_ERRORS, decode_lobby_and_hand)
