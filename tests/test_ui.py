"""Tests for the text board and shell (no terminal required)."""

from __future__ import annotations

import io

import pytest

from antsvbees.insects.defender import Defender, DefenderKind
from antsvbees.insects.invader import Invader
from antsvbees.simulation.game import Game
from antsvbees.ui.text_client import GameShell, icon_for, render_board


def _shell(game: Game) -> tuple[GameShell, io.StringIO]:
    out = io.StringIO()
    return GameShell(game, stdin=io.StringIO(), stdout=out), out


class TestBoard:
    """Tests for board rendering."""

    def test_header_shows_state(self, game: Game) -> None:
        board = render_board(game)
        assert "Turn: 0, Food: 20" in board
        assert "FlyingLeaf, StickyLeaf, IcyLeaf" in board

    def test_icons(self) -> None:
        assert icon_for(None) == " "
        assert icon_for(Defender.create(DefenderKind.THROWER)) == "T"
        assert icon_for(Defender.create(DefenderKind.GUARD)) == "x"

    def test_guard_shows_shielded_icon(self, game: Game) -> None:
        game.deploy_ant("Grower", "0,0")
        game.deploy_ant("Guard", "0,0")
        assert icon_for(game.locations[0][0].get_defender()) == "G"

    def test_bees_and_water(self, game: Game) -> None:
        place = game.locations[1][3]
        place.add_invader(Invader(3, 1))
        place.add_invader(Invader(3, 1))
        place.is_water = True
        board = render_board(game)
        assert "B2" in board
        assert "~~~~" in board


class TestShell:
    """Tests for shell commands."""

    def test_deploy_command(self, game: Game) -> None:
        shell, out = _shell(game)
        shell.onecmd("deploy Thrower 0,1")
        assert game.locations[0][1].get_defender() is not None
        assert "Food: 16" in out.getvalue()
        assert "Thrower(tunnel[0,1]) deployed" in out.getvalue()
        assert game.events.events == []

    def test_alias_and_error(self, game: Game) -> None:
        shell, out = _shell(game)
        shell.onecmd(shell.precmd("d Wizard 0,1"))
        assert "Invalid deployment: unknown ant type." in out.getvalue()

    def test_remove_bad_location(self, game: Game) -> None:
        shell, out = _shell(game)
        shell.onecmd("remove 9,9")
        assert "Invalid removal: illegal location." in out.getvalue()

    def test_turn_announces_win(self, game: Game) -> None:
        shell, out = _shell(game)
        assert shell.onecmd(shell.precmd("t"))
        assert shell.finished
        assert "You win!" in out.getvalue()

    @pytest.mark.parametrize("line", ["end turn", "take turn", "End  Turn"])
    def test_turn_phrases(self, game: Game, line: str) -> None:
        game.hive.add_wave(5, 1)
        shell, _ = _shell(game)
        assert shell.precmd(line) == "turn"
        shell.onecmd(shell.precmd(line))
        assert game.turn == 1

    def test_turn_continues_while_bees_remain(self, game: Game) -> None:
        game.hive.add_wave(5, 1)
        shell, _ = _shell(game)
        assert not shell.onecmd("turn")
        assert game.turn == 1

    def test_completion(self, game: Game) -> None:
        shell, _ = _shell(game)
        assert shell.complete_deploy("th", "deploy th", 7, 9) == ["Thrower"]
        assert shell.complete_boost("Ic", "boost Ic", 6, 8) == ["IcyLeaf"]


def test_main_module_importable() -> None:
    """The __main__ module is importable and exposes main()."""
    from antsvbees.__main__ import main

    assert callable(main)
