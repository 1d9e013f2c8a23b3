#!/usr/bin/env python3
"""Interactive standalone client for lobby protocol testing and basic play."""

from __future__ import annotations

import argparse
import logging

from . import errors
from .config import ClientConfig
from .connection import DecksClient
from .models import Card, Lobby, LobbyAndHand, PlayerSecret
from .protocol import KnownFailure, Result, Success, UnknownFailure


HELP_TEXT = """
Commands:
  create                   # create a lobby and remember its code
  join <code> <name>       # join a lobby, saving the player secret
  state
  deck <deck_id>
  ai                       # add an AI player to the lobby
  start
  choose <winner>
  play <id> [id ...]
  skip <player> [player ...]
  back
  secret                   # print saved lobby code and player id
  help
  quit / exit
""".strip()

ERROR_MESSAGES: dict[type, str] = {
    errors.NameInUse: "That name is already in use in this lobby.",
    errors.LobbyNotFound: "No lobby exists with that code.",
    errors.CardcastTimeout: "The deck source timed out, try again later.",
    errors.DeckNotFound: "No deck exists with that id.",
    errors.GameInProgress: "A game is already in progress.",
    errors.NotCzar: "Only the card czar can choose the winner.",
    errors.NotInRound: "You are not in this round.",
    errors.AlreadyPlayed: "You have already played this round.",
    errors.AlreadyJudging: "The round is already being judged.",
    errors.NotEnoughPlayersToSkip: "Not enough players would remain to skip them.",
    errors.PlayersMustBeSkippable: "Only disconnected or timed out players can be skipped.",
}


def render_hand(cards: tuple[Card, ...] | list[Card]) -> str:
    if not cards:
        return "(empty hand)"
    return "\n".join(f"{index:>2}: {card.text}" for index, card in enumerate(cards))


def describe_error(error: errors.KnownError) -> str:
    if isinstance(error, errors.NotEnoughPlayers):
        return f"At least {error.required} players are needed to start."
    if isinstance(error, errors.WrongNumberOfCards):
        return f"You played {error.got} cards but {error.expected} are needed."
    return ERROR_MESSAGES.get(type(error), f"Server rejected the request: {error!r}")


def describe_result(result: Result) -> str:
    if isinstance(result, KnownFailure):
        return f"error: {describe_error(result.error)}"
    if isinstance(result, UnknownFailure):
        return "error: something went wrong talking to the server"
    if isinstance(result.value, LobbyAndHand):
        lobby = result.value.lobby
        players = ", ".join(f"{p.name} ({p.score})" for p in lobby.players) or "(none)"
        return f"lobby {lobby.game_code}: {players}\n{render_hand(result.value.hand)}"
    if isinstance(result.value, Lobby):
        return f"lobby {result.value.game_code} created"
    if result.value is None:
        return "ok"
    return str(result.value)


def _int_args(parts: list[str]) -> list[int]:
    return [int(part) for part in parts]


class ReplSession:
    """Tracks the current lobby and player secret between REPL commands."""

    def __init__(self, client: DecksClient):
        self.client = client
        self.code: str | None = None
        self.secret: PlayerSecret | None = None

    def handle(self, line: str) -> str:
        parts = line.split()
        cmd = parts[0]

        if cmd == "create" and len(parts) == 1:
            result = self.client.create_lobby()
            if isinstance(result, Success):
                self.code, self.secret = result.value.game_code, None
            return describe_result(result)
        if cmd == "join" and len(parts) == 3:
            result = self.client.new_player(parts[1], parts[2])
            if not isinstance(result, Success):
                return describe_result(result)
            self.code, self.secret = parts[1], result.value
            return f"joined {self.code} as player {self.secret.player_id}"
        if cmd == "secret" and len(parts) == 1:
            return f"{self.code or '(no lobby)'} {self.secret.player_id if self.secret else '(no player)'}"
        if self.code is None:
            raise ValueError("No lobby yet. Use: create, or join <code> <name>")
        if cmd == "ai" and len(parts) == 1:
            return describe_result(self.client.new_ai(self.code))
        if self.secret is None:
            raise ValueError("Join the lobby first: join <code> <name>")

        code, secret = self.code, self.secret
        if cmd == "state" and len(parts) == 1:
            result = self.client.get_lobby_and_hand(code, secret)
        elif cmd == "deck" and len(parts) == 2:
            result = self.client.add_deck(code, secret, parts[1])
        elif cmd == "start" and len(parts) == 1:
            result = self.client.new_game(code, secret)
        elif cmd == "choose" and len(parts) == 2:
            result = self.client.choose(code, secret, int(parts[1]))
        elif cmd == "play" and len(parts) >= 2:
            result = self.client.play(code, secret, _int_args(parts[1:]))
        elif cmd == "skip" and len(parts) >= 2:
            result = self.client.skip(code, secret, _int_args(parts[1:]))
        elif cmd == "back" and len(parts) == 1:
            result = self.client.back(code, secret)
        else:
            return "Unknown command. Type 'help'."
        return describe_result(result)


def main() -> None:
    parser = argparse.ArgumentParser(description="Card game lobby client")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--timeout", type=float, default=10.0)
    parser.add_argument("--tls", action="store_true")
    parser.add_argument("--base-path", default="")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = ClientConfig(host=args.host, port=args.port, timeout=args.timeout, tls=args.tls, base_path=args.base_path)
    session = ReplSession(DecksClient.from_config(config))

    print(HELP_TEXT)

    while True:
        try:
            line = input("decks> ").strip()
        except EOFError:
            print()
            break

        if not line:
            continue
        if line in {"quit", "exit"}:
            break
        if line == "help":
            print(HELP_TEXT)
            continue

        try:
            print(session.handle(line))
        except ValueError as exc:
            print(f"error: {exc}")


if __name__ == "__main__":
    main()
