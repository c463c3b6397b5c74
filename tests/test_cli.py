"""Tests for the tick-arcade CLI."""

from tick_arcade.cli import _build_parser, main


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_tournament_defaults(self):
        args = _build_parser().parse_args(["tournament"])
        assert args.command == "tournament"
        assert args.games == 10
        assert args.speed == "normal"
        assert args.seed is None
        assert not args.show_boards

    def test_snake_flags(self):
        args = _build_parser().parse_args([
            "snake", "--max-ticks", "50", "--grid-size", "8", "--seed", "3",
        ])
        assert args.max_ticks == 50
        assert args.grid_size == 8
        assert args.seed == 3


class TestCLIRuns:
    def test_tournament(self, capsys):
        assert main(["tournament", "--games", "5", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "Tournament: 5 games" in out

    def test_tournament_show_boards(self, capsys):
        assert main([
            "tournament", "--games", "2", "--seed", "1", "--show-boards",
        ]) == 0
        out = capsys.readouterr().out
        assert out.count("---+---+---") == 4

    def test_tournament_rejects_zero_games(self):
        assert main(["tournament", "--games", "0"]) == 2

    def test_snake(self, capsys):
        assert main([
            "snake", "--max-ticks", "30", "--grid-size", "8", "--seed", "5",
        ]) == 0
        out = capsys.readouterr().out.splitlines()
        assert len(out) == 9
        assert out[-1].startswith("score ")
