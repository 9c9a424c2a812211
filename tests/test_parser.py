import itertools
import unittest

from cubegames.parser.enums import Color
from cubegames.parser.errors import (
    ExpectedDigits,
    GameParseError,
    TrailingInput,
    UnexpectedToken,
    UnknownColor,
)
from cubegames.parser.ingest import parse_document, parse_games, parse_pair, parse_record, parse_round
from cubegames.parser.primitives import color_name, color_word, literal, newline, unsigned_int, ws
from cubegames.parser.records import ColorCount, GameRecord
from cubegames.parser.render import render_games, render_record

SAMPLE = (
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green\n"
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue\n"
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red\n"
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red\n"
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"
)


class TestPrimitives(unittest.TestCase):
    def test_literal_matches_and_consumes(self):
        self.assertEqual(literal("Game")("Game 1: ", 0), ("Game", 4))
        with self.assertRaises(UnexpectedToken) as ctx:
            literal("Game")("game 1", 0)
        self.assertEqual(ctx.exception.expected, ("Game",))

    def test_ws_skips_horizontal_space_only(self):
        self.assertEqual(ws(literal("Game"))(" \tGame  1", 0), ("Game", 8))
        with self.assertRaises(UnexpectedToken):
            ws(literal("Game"))("\nGame", 0)

    def test_unsigned_int(self):
        self.assertEqual(unsigned_int("123abc", 0), (123, 3))
        self.assertEqual(unsigned_int("99999999999999999999", 0), (99999999999999999999, 20))
        with self.assertRaises(ExpectedDigits):
            unsigned_int("abc", 0)
        with self.assertRaises(ExpectedDigits):
            unsigned_int("", 0)

    def test_color_name_is_strict_and_case_sensitive(self):
        self.assertEqual(color_name("red", 0), (Color.RED, 3))
        self.assertEqual(color_name("blue,", 0), (Color.BLUE, 4))
        self.assertEqual(color_name("green", 0), (Color.GREEN, 5))
        with self.assertRaises(UnknownColor):
            color_name("Red", 0)
        with self.assertRaises(UnknownColor):
            color_name("purple", 0)

    def test_color_word_is_lenient(self):
        self.assertEqual(color_word("blue,", 0), ((Color.BLUE, "blue"), 4))
        self.assertEqual(color_word("purple;", 0), ((Color.UNKNOWN, "purple"), 6))
        self.assertEqual(color_word("reddish ", 0), ((Color.UNKNOWN, "reddish"), 7))
        self.assertEqual(color_word("unknown", 0), ((Color.UNKNOWN, "unknown"), 7))
        with self.assertRaises(UnknownColor):
            color_word(", 3 red", 0)

    def test_newline(self):
        self.assertEqual(newline("\r\nx", 0), ("\r\n", 2))
        self.assertEqual(newline("\nx", 0), ("\n", 1))
        with self.assertRaises(UnexpectedToken):
            newline("x", 0)


class TestRecordGrammar(unittest.TestCase):
    def test_single_record_scenario(self):
        games = parse_games("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
        self.assertEqual(len(games), 1)
        self.assertEqual(games[0].id, 1)
        self.assertEqual(
            games[0].rounds,
            (ColorCount(4, 0, 3), ColorCount(1, 2, 6), ColorCount(0, 2, 0)),
        )

    def test_pair_and_round(self):
        self.assertEqual(parse_pair("3 blue,", 0), ((3, Color.BLUE, "blue"), 6))
        count, pos = parse_round("3 blue, 4 red; 1 red", 0)
        self.assertEqual(count, ColorCount(red=4, blue=3))
        self.assertEqual(pos, 13)

    def test_repeated_color_in_round_is_summed(self):
        games = parse_games("Game 9: 2 red, 3 red, 1 blue")
        self.assertEqual(games[0].rounds, (ColorCount(red=5, blue=1),))

    def test_pair_order_does_not_change_fold(self):
        pairs = ["3 blue", "4 red", "2 green", "1 red"]
        expected = ColorCount(red=5, green=2, blue=3)
        for perm in itertools.permutations(pairs):
            games = parse_games("Game 1: " + ", ".join(perm))
            self.assertEqual(games[0].rounds, (expected,))

    def test_single_pair_has_one_nonzero_field(self):
        (game,) = parse_games("Game 3: 7 green")
        (only,) = game.rounds
        self.assertEqual([v for v in only.as_dict().values() if v], [7])

    def test_five_game_sample_with_indentation(self):
        indented = "\n".join("    " + line for line in SAMPLE.splitlines())
        games = parse_games(indented)
        self.assertEqual([g.id for g in games], [1, 2, 3, 4, 5])
        self.assertEqual(games[2].rounds[0], ColorCount(red=20, green=8, blue=6))
        self.assertEqual(games[4].rounds, (ColorCount(6, 3, 1), ColorCount(1, 2, 2)))

    def test_crlf_and_trailing_newline(self):
        crlf = SAMPLE.replace("\n", "\r\n") + "\r\n"
        self.assertEqual(parse_games(crlf), parse_games(SAMPLE))
        self.assertEqual(parse_games(SAMPLE + "\n\n"), parse_games(SAMPLE))

    def test_empty_input_has_no_games(self):
        self.assertEqual(parse_games(""), [])
        self.assertEqual(parse_games(" \n\t\n"), [])

    def test_record_without_rounds(self):
        games = parse_games("Game 7:\nGame 8:   \nGame 9: 1 red")
        self.assertEqual(games[0], GameRecord(id=7, rounds=()))
        self.assertEqual(games[1], GameRecord(id=8, rounds=()))
        self.assertEqual(games[2].rounds, (ColorCount(red=1),))

    def test_ids_are_not_range_checked(self):
        (game,) = parse_games("Game 123456789012345: 1 red")
        self.assertEqual(game.id, 123456789012345)

    def test_parse_record_stops_at_line_end(self):
        game, pos = parse_record("Game 2: 1 blue\nGame 3: 1 red")
        self.assertEqual(game.id, 2)
        self.assertEqual(pos, 14)


class TestLeniency(unittest.TestCase):
    def test_unknown_color_is_dropped(self):
        doc = parse_document("Game 1: 3 purple, 4 red; 2 green\nGame 2: 5 teal")
        self.assertEqual(doc.games[0].rounds, (ColorCount(red=4), ColorCount(green=2)))
        self.assertEqual(doc.games[1].rounds, (ColorCount(),))
        self.assertEqual([(p.game_id, p.round_index, p.count, p.word) for p in doc.ignored],
                         [(1, 0, 3, "purple"), (2, 0, 5, "teal")])

    def test_missing_color_word_is_an_error(self):
        with self.assertRaises(UnknownColor):
            parse_games("Game 1: 3 , 4 red")
        with self.assertRaises(UnknownColor):
            parse_games("Game 1: 3")


class TestParseErrors(unittest.TestCase):
    def test_missing_colon(self):
        with self.assertRaises(UnexpectedToken) as ctx:
            parse_games("Game 1 3 blue, 4 red")
        self.assertEqual(ctx.exception.expected, (":",))
        self.assertEqual(ctx.exception.location.column, 8)

    def test_error_anywhere_aborts_whole_parse(self):
        bad = SAMPLE + "\nGame 6 1 red"
        with self.assertRaises(UnexpectedToken) as ctx:
            parse_games(bad)
        self.assertEqual(ctx.exception.location.line, 6)

    def test_missing_game_tag(self):
        with self.assertRaises(UnexpectedToken):
            parse_games("Round 1: 1 red")

    def test_missing_id(self):
        with self.assertRaises(ExpectedDigits):
            parse_games("Game : 1 red")

    def test_dangling_separator(self):
        with self.assertRaises(ExpectedDigits):
            parse_games("Game 1: 1 red,")
        with self.assertRaises(ExpectedDigits):
            parse_games("Game 1: 1 red;")

    def test_trailing_input_on_record_line(self):
        with self.assertRaises(TrailingInput):
            parse_games("Game 1: 3 blue 4 red")
        with self.assertRaises(TrailingInput):
            parse_games("Game 1: 3 blue | extra")

    def test_blank_line_between_records_is_rejected(self):
        with self.assertRaises(UnexpectedToken):
            parse_games("Game 1: 1 red\n\nGame 2: 1 blue")

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            parse_games("nonsense")
        self.assertTrue(issubclass(TrailingInput, GameParseError))


class TestRender(unittest.TestCase):
    def test_render_record(self):
        game = GameRecord(id=4, rounds=(ColorCount(14, 3, 15), ColorCount(), ColorCount(green=2)))
        self.assertEqual(render_record(game), "Game 4: 14 red, 3 green, 15 blue; 0 red; 2 green")
        self.assertEqual(render_record(GameRecord(id=7)), "Game 7:")

    def test_reparse_rendering_is_stable(self):
        games = parse_games(SAMPLE + "\nGame 6:\nGame 7: 0 red; 2 purple")
        self.assertEqual(parse_games(render_games(games)), games)


if __name__ == "__main__":
    unittest.main(verbosity=2)
