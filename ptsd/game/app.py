"""The game application: its states, phases and main loop."""

from __future__ import annotations

import argparse
import logging
from enum import Enum, auto
from typing import Any, List, Optional, Sequence

from ..keycode import Keycode
from ..logger import Level
from ..renderer import Renderer
from .character import Character
from .phase import PhaseResourceManager

_log = logging.getLogger(__name__)

_PLAYER_START = (-112.5, -140.5)


class AppState(Enum):
    """Stage of the application's main loop."""

    ZERO = auto()
    ZEROUPDATE = auto()
    START = auto()
    UPDATE = auto()
    END = auto()


class Phase(Enum):
    """Level progress of the player."""

    ZERO = 0
    START = 1
    GRASSLAND1 = 2
    GRASSLAND2 = 3


class App:
    """The game; ``context`` supplies input and the exit flag."""

    def __init__(self, context: Any = None, resource_dir: str = ".") -> None:
        if context is None:
            from ..context import Context

            context = Context.get_instance()
        self._context = context
        self._resource_dir = str(resource_dir)
        self._state = AppState.ZERO
        self._phase = Phase.ZERO
        self._root = Renderer()
        self._player: Optional[Character] = None
        self._logos: List[Character] = []
        self._resources: Optional[PhaseResourceManager] = None
        self._enter_down = False

    @property
    def state(self) -> AppState:
        """Current stage of the main loop."""
        return self._state

    @property
    def phase(self) -> Phase:
        """Current level phase."""
        return self._phase

    @property
    def root(self) -> Renderer:
        """The renderer holding every drawn object."""
        return self._root

    @property
    def player(self) -> Optional[Character]:
        """The player character, once created."""
        return self._player

    @property
    def logos(self) -> List[Character]:
        """Objects shown on the title screen only."""
        return list(self._logos)

    @property
    def resource_manager(self) -> Optional[PhaseResourceManager]:
        """The phase resources, once created."""
        return self._resources

    def _path(self, name: str) -> str:
        return f"{self._resource_dir}/res/{name}"

    def _add_player(self) -> None:
        self._player = Character(self._path("player.png"))
        self._player.position = _PLAYER_START
        self._player.z_index = 50
        self._root.add_child(self._player)

    def _add_resources(self) -> None:
        self._resources = PhaseResourceManager(self._resource_dir)
        self._root.add_children(self._resources.children)

    def _quit_requested(self) -> bool:
        keys = self._context.input
        return keys.is_key_pressed(Keycode.ESCAPE) or keys.exit_requested()

    def zero(self) -> None:
        """Build the title screen."""
        _log.log(Level.TRACE, "Zero")
        self._add_player()

        logo = Character(self._path("logo.png"))
        logo.position = (0, 300)
        logo.z_index = 49
        self._logos.append(logo)
        self._root.add_child(logo)

        self._add_resources()
        self._state = AppState.ZEROUPDATE

    def zero_update(self) -> None:
        """Run one frame of the title screen; K leaves it."""
        if self._quit_requested():
            self._state = AppState.END

        if self._context.input.is_key_pressed(Keycode.K):
            for logo in self._logos:
                self._root.remove_child(logo)
            self._resources.next_phase()  # type: ignore[union-attr]
            self._state = AppState.START

        self._root.update()

    def start(self) -> None:
        """Set up the level."""
        _log.log(Level.TRACE, "Start")
        self._add_player()
        self._add_resources()
        self._state = AppState.UPDATE

    def update(self) -> None:
        """Run one frame of the level; releasing Enter validates the task."""
        if self._quit_requested():
            self._state = AppState.END

        pressed = self._context.input.is_key_pressed(Keycode.RETURN)
        if self._enter_down and not pressed:
            self._validate_task()
        self._enter_down = pressed

        self._root.update()

    def end(self) -> None:
        """Finish the game."""
        _log.log(Level.TRACE, "End")

    def _validate_task(self) -> None:
        _log.debug("Validating the task %d", self._phase.value)
        if self._phase is Phase.ZERO:
            self._phase = Phase.START
            self._player.position = _PLAYER_START  # type: ignore[union-attr]
        elif self._phase is Phase.START:
            self._phase = Phase.GRASSLAND1
            self._player.position = _PLAYER_START  # type: ignore[union-attr]
            self._resources.next_phase()  # type: ignore[union-attr]

    def step(self) -> None:
        """Run the handler of the current state once."""
        if self._state is AppState.END:
            self.end()
            self._context.exit = True
            return
        handlers = {
            AppState.ZERO: self.zero,
            AppState.ZEROUPDATE: self.zero_update,
            AppState.START: self.start,
            AppState.UPDATE: self.update,
        }
        handlers[self._state]()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it ends."""
    parser = argparse.ArgumentParser(description="Run the game.")
    parser.add_argument(
        "resource_dir",
        nargs="?",
        default=".",
        help="directory holding the res/ and Font/ folders",
    )
    args = parser.parse_args(argv)

    from ..context import Context

    context = Context.get_instance()
    app = App(context, args.resource_dir)
    try:
        while not context.exit:
            app.step()
            context.update()
    finally:
        context.close()
    return 0