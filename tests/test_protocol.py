import unittest

from decks_client import errors
from decks_client.models import PlayerSecret, decode_unit
from decks_client.protocol import (
    NO_ERRORS,
    ErrorCase,
    ErrorTable,
    RequestDescriptor,
    command_request,
    encode_command,
    error_case,
    lobby_path,
)


class EnvelopeTests(unittest.TestCase):
    def setUp(self):
        self.secret = PlayerSecret(3, "s3cret")

    def test_args_are_merged_at_top_level(self):
        envelope = encode_command("play", self.secret, ids=[0, 2])
        self.assertEqual(envelope, {"command": "play", "secret": {"id": 3, "secret": "s3cret"}, "ids": [0, 2]})

    def test_envelope_without_args(self):
        envelope = encode_command("back", self.secret)
        self.assertEqual(envelope, {"command": "back", "secret": {"id": 3, "secret": "s3cret"}})

    def test_reserved_argument_names_are_rejected(self):
        with self.assertRaises(ValueError):
            encode_command("play", self.secret, command="other")
        with self.assertRaises(ValueError):
            encode_command("play", self.secret, secret="other")

    def test_reserved_names_rejected_through_command_request(self):
        with self.assertRaises(ValueError):
            command_request("ABCD", "play", self.secret, NO_ERRORS, decode_unit, secret="other")

    def test_builder_parameter_names_are_usable_as_arguments(self):
        descriptor = command_request(
            "ABCD", "rename", self.secret, NO_ERRORS, decode_unit, code="WXYZ", name="Bob", errors=1, decode=2
        )
        self.assertEqual(descriptor.path, "/lobbies/ABCD")
        self.assertEqual(
            descriptor.json_body(),
            {
                "command": "rename",
                "secret": {"id": 3, "secret": "s3cret"},
                "code": "WXYZ",
                "name": "Bob",
                "errors": 1,
                "decode": 2,
            },
        )

    def test_command_request_posts_to_lobby(self):
        descriptor = command_request("ABCD", "choose", self.secret, NO_ERRORS, decode_unit, winner=1)
        self.assertEqual(descriptor.method, "POST")
        self.assertEqual(descriptor.path, "/lobbies/ABCD")
        self.assertEqual(
            descriptor.encode_body(),
            b'{"command":"choose","secret":{"id":3,"secret":"s3cret"},"winner":1}',
        )

    def test_secret_is_not_shown_in_repr(self):
        self.assertNotIn("s3cret", repr(self.secret))


class PathTests(unittest.TestCase):
    def test_lobby_path(self):
        self.assertEqual(lobby_path("ABCD"), "/lobbies/ABCD")
        self.assertEqual(lobby_path("ABCD", "players", "newAi"), "/lobbies/ABCD/players/newAi")

    def test_lobby_code_is_quoted(self):
        self.assertEqual(lobby_path("A/B C"), "/lobbies/A%2FB%20C")

    def test_descriptor_without_body(self):
        descriptor = RequestDescriptor("POST", "/lobbies", None, NO_ERRORS, decode_unit)
        self.assertIsNone(descriptor.encode_body())


class ErrorTableTests(unittest.TestCase):
    def test_exact_match_on_status_and_tag(self):
        case = errors.NEW_PLAYER_ERRORS.match(404, "lobby-not-found")
        self.assertIsNotNone(case)
        self.assertEqual(case.decode({}), errors.LobbyNotFound())

    def test_status_or_tag_alone_does_not_match(self):
        self.assertIsNone(errors.NEW_PLAYER_ERRORS.match(400, "lobby-not-found"))
        self.assertIsNone(errors.NEW_PLAYER_ERRORS.match(404, "name-in-use"))
        self.assertIsNone(errors.NEW_PLAYER_ERRORS.match(500, "lobby-not-found"))

    def test_duplicate_pairs_are_rejected(self):
        with self.assertRaises(ValueError):
            ErrorTable(
                [
                    error_case(400, "not-czar", errors.NotCzar),
                    error_case(400, "not-czar", errors.NotCzar),
                ]
            )

    def test_same_tag_different_status_is_allowed(self):
        table = ErrorTable(
            [
                error_case(400, "deck-not-found", errors.DeckNotFound),
                error_case(404, "deck-not-found", errors.CardcastTimeout),
            ]
        )
        self.assertEqual(table.match(404, "deck-not-found").decode({}), errors.CardcastTimeout())

    def test_structured_variant_decoder(self):
        case = errors.PLAY_ERRORS.match(400, "wrong-number-of-cards-played")
        self.assertIsInstance(case, ErrorCase)
        self.assertEqual(case.decode({"error": "wrong-number-of-cards-played", "got": 2, "expected": 3}), errors.WrongNumberOfCards(2, 3))

    def test_empty_table(self):
        self.assertEqual(len(NO_ERRORS), 0)
        self.assertIsNone(NO_ERRORS.match(400, "anything"))


class ErrorVariantTests(unittest.TestCase):
    def test_variants_belong_to_one_command(self):
        self.assertIsInstance(errors.NameInUse(), errors.NewPlayerError)
        self.assertNotIsInstance(errors.NameInUse(), errors.AddDeckError)
        self.assertNotIsInstance(errors.NotEnoughPlayers(3), errors.SkipError)
        self.assertNotIsInstance(errors.NotEnoughPlayersToSkip(), errors.NewGameError)

    def test_variants_compare_by_value(self):
        self.assertEqual(errors.WrongNumberOfCards(2, 1), errors.WrongNumberOfCards(2, 1))
        self.assertNotEqual(errors.WrongNumberOfCards(2, 1), errors.WrongNumberOfCards(1, 2))
        self.assertNotEqual(errors.AlreadyPlayed(), errors.AlreadyJudging())


if __name__ == "__main__":
    unittest.main()
