"""Closed error sets, one per command.

Each command gets its own base class so callers match only on the variants
that command can actually produce.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .decoders import as_int
from .protocol import ErrorCase, ErrorTable, KnownError, error_case


class NewPlayerError(KnownError):
    pass


@dataclass(frozen=True)
class NameInUse(NewPlayerError):
    pass


@dataclass(frozen=True)
class LobbyNotFound(NewPlayerError):
    pass


NEW_PLAYER_ERRORS: ErrorTable[NewPlayerError] = ErrorTable(
    [
        error_case(400, "name-in-use", NameInUse),
        error_case(404, "lobby-not-found", LobbyNotFound),
    ]
)


class AddDeckError(KnownError):
    pass


@dataclass(frozen=True)
class CardcastTimeout(AddDeckError):
    pass


@dataclass(frozen=True)
class DeckNotFound(AddDeckError):
    pass


ADD_DECK_ERRORS: ErrorTable[AddDeckError] = ErrorTable(
    [
        error_case(502, "cardcast-timeout", CardcastTimeout),
        error_case(400, "deck-not-found", DeckNotFound),
    ]
)


class NewGameError(KnownError):
    pass


@dataclass(frozen=True)
class GameInProgress(NewGameError):
    pass


@dataclass(frozen=True)
class NotEnoughPlayers(NewGameError):
    required: int


def _not_enough_players(payload: dict[str, Any]) -> NotEnoughPlayers:
    return NotEnoughPlayers(required=as_int(payload, "required"))


NEW_GAME_ERRORS: ErrorTable[NewGameError] = ErrorTable(
    [
        error_case(400, "game-in-progress", GameInProgress),
        ErrorCase(400, "not-enough-players", _not_enough_players),
    ]
)


class ChooseError(KnownError):
    pass


@dataclass(frozen=True)
class NotCzar(ChooseError):
    pass


CHOOSE_ERRORS: ErrorTable[ChooseError] = ErrorTable([error_case(400, "not-czar", NotCzar)])


class PlayError(KnownError):
    pass


@dataclass(frozen=True)
class NotInRound(PlayError):
    pass


@dataclass(frozen=True)
class AlreadyPlayed(PlayError):
    pass


@dataclass(frozen=True)
class AlreadyJudging(PlayError):
    pass


@dataclass(frozen=True)
class WrongNumberOfCards(PlayError):
    got: int
    expected: int


def _wrong_number_of_cards(payload: dict[str, Any]) -> WrongNumberOfCards:
    return WrongNumberOfCards(got=as_int(payload, "got"), expected=as_int(payload, "expected"))


PLAY_ERRORS: ErrorTable[PlayError] = ErrorTable(
    [
        error_case(400, "not-in-round", NotInRound),
        error_case(400, "already-played", AlreadyPlayed),
        error_case(400, "already-judging", AlreadyJudging),
        ErrorCase(400, "wrong-number-of-cards-played", _wrong_number_of_cards),
    ]
)


class SkipError(KnownError):
    pass


@dataclass(frozen=True)
class NotEnoughPlayersToSkip(SkipError):
    pass


@dataclass(frozen=True)
class PlayersMustBeSkippable(SkipError):
    pass


SKIP_ERRORS: ErrorTable[SkipError] = ErrorTable(
    [
        error_case(400, "not-enough-players-to-skip", NotEnoughPlayersToSkip),
        error_case(400, "players-must-be-skippable", PlayersMustBeSkippable),
    ]
)
