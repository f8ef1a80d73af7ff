"""
Unit tests for the command line entry point.

Runs the play and watch subcommands with scripted input.
"""
import io
import sys

import pytest

import main


def run_main(monkeypatch: pytest.MonkeyPatch, argv, stdin: str = "") -> None:
    """Run main() with the given arguments and input."""
    monkeypatch.setattr(sys, "argv", ["main.py", *argv])
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
    main.main()


# ============================================================================
# Play Command Tests
# ============================================================================

class TestPlay:
    """Test the interactive play command."""

    def test_play_wins_mine_free_board(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """One guess clears a board without mines."""
        run_main(
            monkeypatch,
            ["play", "--size", "3", "--mines", "0", "--seed", "5"],
            "guess 1 1\n",
        )

        out = capsys.readouterr().out
        assert "Game over\nYou win!\n" in out
        assert out.endswith("  012\n\n0    \n1    \n2    \n\n")

    def test_play_uses_default_board(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """Without flags the board is the default 4x4."""
        run_main(monkeypatch, ["play", "--seed", "1"])

        out = capsys.readouterr().out
        assert "  0123\n\n0 ????\n" in out
        assert out.endswith("Game abandoned\n")

    def test_play_rejects_bad_config(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """Too many mines is a usage error."""
        with pytest.raises(SystemExit) as excinfo:
            run_main(monkeypatch, ["play", "--size", "3", "--mines", "9"])

        assert excinfo.value.code == 2
        assert "Too many mines" in capsys.readouterr().err


# ============================================================================
# Watch Command Tests
# ============================================================================

class TestWatch:
    """Test the automated watch command."""

    def test_watch_counts_wins(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """Mine-free boards are won on the first guess every game."""
        run_main(
            monkeypatch,
            ["watch", "--games", "2", "--delay", "0", "--size", "2",
             "--mines", "0", "--seed", "4"],
        )

        out = capsys.readouterr().out
        assert out.count("*** WIN! ***") == 2
        assert "=== Final: 2/2 wins (100%) ===" in out

    def test_watch_reports_every_game(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """Each game ends in a win or a loss."""
        run_main(
            monkeypatch,
            ["watch", "--games", "3", "--delay", "0", "--size", "3",
             "--mines", "2", "--seed", "11"],
        )

        out = capsys.readouterr().out
        assert out.count("*** WIN! ***") + out.count("*** LOST (hit mine) ***") == 3
        assert "=== Final: " in out
