"""Tests for the command-line entry point."""
import json

import cli
from crazy8.core.cardset import CardSetInvariantError


class TestMain:
    def test_summary_line(self, capsys):
        assert cli.main(["--games", "20", "--seed", "1"]) == 0
        out = capsys.readouterr().out.strip().splitlines()
        assert out[-1].startswith("Game length: ")
        assert out[-1].endswith(" quit)")

    def test_histogram(self, capsys):
        assert cli.main(["--games", "20", "--seed", "1", "--histogram"]) == 0
        out = capsys.readouterr().out
        assert "TURNS" in out
        assert "*" in out

    def test_watch(self, capsys):
        assert cli.main(["--watch", "--seed", "4"]) == 0
        out = capsys.readouterr().out
        assert "GAME START" in out
        assert "plays" in out

    def test_trace_prints_json_events(self, capsys):
        assert cli.main(["--trace", "--seed", "4"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        events = [json.loads(line) for line in lines]
        assert events[0]["type"] == "start"
        assert events[-1]["type"] in ("win", "quit")

    def test_trace_is_deterministic(self, capsys):
        cli.main(["--trace", "--seed", "8"])
        first = capsys.readouterr().out
        cli.main(["--trace", "--seed", "8"])
        assert capsys.readouterr().out == first

    def test_invalid_settings(self, capsys):
        assert cli.main(["--players", "4", "--hand-size", "13"]) == 2
        assert "Invalid settings" in capsys.readouterr().err

    def test_invariant_error_exit_code(self, capsys, monkeypatch):
        def broken(config, observer=None):
            raise CardSetInvariantError(0b1, 0b10)

        monkeypatch.setattr(cli, "run_simulation", broken)
        assert cli.main(["--games", "1"]) == 1
        assert "got 0x2 from 0x1" in capsys.readouterr().err
