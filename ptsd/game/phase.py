"""Per-phase resources: the task text and the background image."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..color import Color, Colors
from ..game_object import GameObject
from ..image import Image
from ..text import Text

_log = logging.getLogger(__name__)

PHASE_TASKS = (
    "",
    "Levels 1-1",
    "Make the giraffe move into the red area using the keyboard!",
    "Make the chest disappear when the giraffe touches it!",
    "Write a program to give your bee friend an animation!",
    "Write a program to open the door when your character touches it!",
    "Design a program to countdown, stop animation after OK display",
)
VALIDATION = ""

_FONT_SIZE = 40
_LAST_PHASE = 3


def _task_message(phase: int) -> str:
    return f"{PHASE_TASKS[phase]}\n{VALIDATION}"


class TaskText(GameObject):
    """The task description shown in the upper right of the window.

    ``font_path`` is a font file, or None for the built-in font.
    """

    def __init__(self, font_path: Optional[str] = None) -> None:
        super().__init__(
            Text(font_path, _FONT_SIZE, _task_message(0), Color.from_name(Colors.WHITE)),
            100,
        )
        self.transform.translation[:] = (550.0, 330.0)

    def next_phase(self, phase: int) -> None:
        """Show the task of ``phase``."""
        self.drawable.text = _task_message(phase)  # type: ignore[union-attr]


class BackgroundImage(GameObject):
    """The background drawn behind everything else."""

    def __init__(self, resource_dir: str) -> None:
        self._resource_dir = str(resource_dir)
        super().__init__(Image(f"{self._resource_dir}/res/Background.png"), -10)

    def image_path(self, phase: int) -> str:
        """Path of the background image for ``phase``."""
        return f"{self._resource_dir}/res/Background{phase}.png"

    def next_phase(self, phase: int) -> None:
        """Show the background of ``phase``."""
        self.drawable.set_image(self.image_path(phase))  # type: ignore[union-attr]


class PhaseResourceManager:
    """Owns the task text and background and moves them through the phases."""

    def __init__(self, resource_dir: str) -> None:
        font_path: Optional[str] = f"{resource_dir}/Font/Inkfree.ttf"
        if not Path(font_path).is_file():
            _log.warning("Font not found: '%s'; using the built-in font", font_path)
            font_path = None
        self.task_text = TaskText(font_path)
        self.background = BackgroundImage(resource_dir)
        self.background.transform.scale[:] = (5.0, 7.0)
        self._phase = 1

    @property
    def phase(self) -> int:
        """The phase the next call to :meth:`next_phase` moves to."""
        return self._phase

    @property
    def children(self) -> List[GameObject]:
        """The objects to draw for the current phase."""
        return [self.task_text, self.background]

    def next_phase(self) -> None:
        """Move to the next phase; does nothing once the last is reached."""
        if self._phase == _LAST_PHASE:
            return
        _log.debug("Passed! Next phase: %d", self._phase)
        self.background.next_phase(self._phase)
        self.task_text.next_phase(self._phase)
        self._phase += 1