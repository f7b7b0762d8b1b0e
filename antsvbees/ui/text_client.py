"""Text board and interactive shell for playing a Game in a terminal.

The board shows one row per tunnel with the hive on the right: each
location prints its visible ant icon, a ``B`` with a count when bees are
present, and ``~~~~`` under water locations.  The shell is a ``cmd.Cmd``
that maps player commands onto the Game's command surface.
"""

from __future__ import annotations

import cmd
from typing import IO, TYPE_CHECKING, ClassVar

from antsvbees.colony.boosts import Boost
from antsvbees.insects.defender import DefenderKind
from antsvbees.simulation.game import Outcome

if TYPE_CHECKING:
    from antsvbees.insects.defender import Defender
    from antsvbees.simulation.game import Game

_ICONS: dict[DefenderKind, str] = {
    DefenderKind.GROWER: "G",
    DefenderKind.THROWER: "T",
    DefenderKind.EATER: "E",
    DefenderKind.SCUBA: "S",
}
_CELL = 5  # characters per location column


def icon_for(defender: Defender | None) -> str:
    """Return a one-character icon for the visible defender.

    A full eater is lowercase.  A guard shows the icon of the ant it
    shields, or ``x`` when it shields nothing.
    """
    if defender is None:
        return " "
    if defender.kind is DefenderKind.GUARD:
        guarded = defender.guarded()
        return icon_for(guarded) if guarded is not None else "x"
    icon = _ICONS[defender.kind]
    if defender.kind is DefenderKind.EATER and defender.is_full:
        icon = icon.lower()
    return icon


def _bees(count: int) -> str:
    if count == 0:
        return "  "
    return "B" + (str(count) if count > 1 else " ")


def render_board(game: Game) -> str:
    """Render the game state as a multi-line string."""
    locations = game.locations
    length = len(locations[0]) if locations else 0
    header = "".join(f"{i:<{_CELL}}" for i in range(length))
    lines = [
        "The Colony is under attack!",
        f"Turn: {game.turn}, Food: {game.food}, "
        f"Boosts available: [{', '.join(game.boost_names())}]",
        "     " + header + " Hive",
    ]
    for tunnel, row in enumerate(locations):
        border = "    " + "=" * (_CELL * length)
        if tunnel == 0:
            border += "   " + _bees(game.hive_invader_count())
        lines.append(border)
        contents = "".join(
            f"{icon_for(place.get_defender())} {_bees(len(place.invaders))} "
            for place in row
        )
        lines.append(f"{tunnel})  " + contents)
        terrain = "".join("~~~~ " if place.is_water else "==== " for place in row)
        lines.append("    " + terrain)
    lines.append("     " + header)
    return "\n".join(lines)


class GameShell(cmd.Cmd):
    """Interactive command loop for one Game.

    Attributes:
        game: The game being played.
        finished: Set once the game is won or lost.
    """

    prompt = "AvB $ "
    _ALIASES: ClassVar[dict[str, str]] = {
        "add": "deploy",
        "d": "deploy",
        "rm": "remove",
        "b": "boost",
        "t": "turn",
    }
    _PHRASES: ClassVar[dict[str, str]] = {
        "end turn": "turn",
        "take turn": "turn",
    }

    def __init__(
        self,
        game: Game,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.game = game
        self.finished = False
        self.intro = render_board(game)

    def _say(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def _show_events(self) -> None:
        for event in self.game.events.drain():
            self._say(event.message)

    def precmd(self, line: str) -> str:
        phrase = " ".join(line.split()).lower()
        if phrase in self._PHRASES:
            return self._PHRASES[phrase]
        head, _, rest = line.partition(" ")
        if head in self._ALIASES:
            return f"{self._ALIASES[head]} {rest}".strip()
        return line

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> None:
        self._say(f"Unknown command: {line}")

    def do_show(self, arg: str) -> None:
        """Show the current game board."""
        self._say(render_board(self.game))

    def do_deploy(self, arg: str) -> None:
        """deploy <antType> <row,col> -- deploy an ant, e.g. "deploy Thrower 0,6"."""
        parts = arg.split()
        if len(parts) != 2:
            self._say("Usage: deploy <antType> <row,col>")
            return
        error = self.game.deploy_ant(parts[0], parts[1])
        if error:
            self._say(f"Invalid deployment: {error}.")
        else:
            self._show_events()
            self._say(render_board(self.game))

    def complete_deploy(
        self,
        text: str,
        line: str,
        begidx: int,
        endidx: int,
    ) -> list[str]:
        names = [kind.display_name for kind in DefenderKind]
        return [n for n in names if n.lower().startswith(text.lower())]

    def do_remove(self, arg: str) -> None:
        """remove <row,col> -- remove the ant from a tunnel location."""
        error = self.game.remove_ant(arg.strip())
        if error:
            self._say(f"Invalid removal: {error}.")
        else:
            self._say(render_board(self.game))

    def do_boost(self, arg: str) -> None:
        """boost <boost> <row,col> -- apply a boost to the ant at a location."""
        parts = arg.split()
        if len(parts) != 2:
            self._say("Usage: boost <boost> <row,col>")
            return
        error = self.game.boost_ant(parts[0], parts[1])
        if error:
            self._say(f"Invalid boost: {error}")
        else:
            self._show_events()

    def complete_boost(
        self,
        text: str,
        line: str,
        begidx: int,
        endidx: int,
    ) -> list[str]:
        return [n for n in self.game.boost_names() if n.startswith(text)]

    def do_turn(self, arg: str) -> bool:
        """Ends the current turn. Ants and bees will act."""
        self.game.take_turn()
        self._show_events()
        self._say(render_board(self.game))
        match self.game.outcome():
            case Outcome.WON:
                self._say("Yaaaay---\nAll bees are vanquished. You win!")
                self.finished = True
            case Outcome.LOST:
                self._say("Bzzzzz---\nThe ant queen has perished! Please try again.")
                self.finished = True
        return self.finished

    def do_quit(self, arg: str) -> bool:
        """Leave the game."""
        return True

    do_EOF = do_quit


def boost_help() -> str:
    """Describe the built-in boosts for the help text."""
    return ", ".join(b.value for b in Boost)
