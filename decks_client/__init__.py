from .connection import DecksClient, HTTPTransport, execute
from .models import Card, Lobby, LobbyAndHand, Player, PlayerSecret
from .protocol import KnownError, KnownFailure, RequestDescriptor, Success, UnknownFailure

__all__ = [
    "Card",
    "DecksClient",
    "HTTPTransport",
    "KnownError",
    "KnownFailure",
    "Lobby",
    "LobbyAndHand",
    "Player",
    "PlayerSecret",
    "RequestDescriptor",
    "Success",
    "UnknownFailure",
    "execute",
]
