"""Tests for the classify command-line script."""

import pytest
from poker_hands.rules import Rank, Pair, Straight, make_cards_from_string
from poker_hands.scripts.classify import build_parser, classify_hands, format_winner, main


class TestClassifyHands:
    def test_classifies_each_hand(self):
        results = classify_hands(["4H KD 4C", "2H 3D 4S 5C 6C"])

        assert [hand for _, hand in results] == [Pair(Rank.FOUR), Straight(Rank.SIX)]
        assert results[0][0] == make_cards_from_string("4H KD 4C")

    def test_bad_card_raises(self):
        with pytest.raises(ValueError):
            classify_hands(["4H KX"])

    def test_format_single_winner(self):
        results = classify_hands(["4H KD 4C", "2H 3D 4S 5C 6C"])
        assert format_winner(results) == "Winner: hand 2 (Straight: Six high)"

    def test_format_tie(self):
        results = classify_hands(["4H KD 4C", "4S 2D 4D"])
        assert format_winner(results) == "Tie between hands 1, 2 (Pair)"


class TestMain:
    def test_plain_output(self, capsys):
        assert main(["--plain", "9C KD 7H"]) == 0

        out = capsys.readouterr().out
        assert out == "9♣ K♦ 7♥: High card: King of diamonds\n"

    def test_plain_output_with_winner(self, capsys):
        assert main(["--plain", "2H 3H 4H 5H 6H", "AS AD AC AH KD"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "2♥ 3♥ 4♥ 5♥ 6♥: Straight flush: Six high",
            "A♠ A♦ A♣ A♥ K♦: Four of a kind: Ace",
            "Winner: hand 1 (Straight flush: Six high)",
        ]

    def test_table_output(self, capsys):
        assert main(["2H 2C 4H 4D 4S", "TS TD 2C"]) == 0

        out = capsys.readouterr().out
        assert "Poker hands" in out
        assert "Winner: hand 1 (Full house: Four over Deuce)" in out

    def test_list_categories(self, capsys):
        assert main(["--plain", "--list-categories"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 9
        assert lines[0].startswith("Highest Card: ")
        assert lines[-1].startswith("Straight Flush: ")

    def test_no_hands_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2
        assert "at least one hand is required" in capsys.readouterr().err

    def test_bad_card_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["4H KX"])
        assert excinfo.value.code == 2
        assert "Invalid suit character: X" in capsys.readouterr().err

    def test_empty_hand_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["4H KD", "  "])
        assert excinfo.value.code == 2
        assert "every hand needs at least one card" in capsys.readouterr().err

    def test_parser_flags(self):
        args = build_parser().parse_args(["-v", "--plain", "AH"])
        assert args.verbose
        assert args.plain
        assert args.hands == ["AH"]
