"""Background music and sound effects played through the mixer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pygame

from .asset_store import AssetStore

_log = logging.getLogger(__name__)

MAX_VOLUME = 128


def _load_music(filepath: str) -> Optional[str]:
    """Check that a music file exists; return its path, or None on failure."""
    if not Path(filepath).is_file():
        _log.debug("Failed to load BGM: '%s'", filepath)
        _log.debug("No such file")
        return None
    return filepath


def _load_chunk(filepath: str) -> Optional[pygame.mixer.Sound]:
    """Load a sound effect into memory; return None on failure."""
    try:
        return pygame.mixer.Sound(filepath)
    except (pygame.error, OSError) as exc:
        _log.debug("Failed to load SFX: '%s'", filepath)
        _log.debug("%s", exc)
        return None


def _clamped(volume: int) -> int:
    return min(int(volume), MAX_VOLUME)


def _music_loops(loop: int) -> int:
    """Turn a count of plays (-1 for forever) into extra repeats."""
    if loop < 0:
        return -1
    return max(loop, 1) - 1


class BGM:
    """Background music streamed from disk.

    Only one piece of music plays at a time: playing one stops any other.
    Volumes range from 0 (mute) to 128 (loudest) and apply to all music.
    """

    _store: AssetStore[Optional[str]] = AssetStore(_load_music)

    def __init__(self, path: str) -> None:
        self._path = self._store.get(path)

    @property
    def path(self) -> Optional[str]:
        """Path of the loaded music, or None if it failed to load."""
        return self._path

    @property
    def volume(self) -> int:
        """Music volume in 0-128; negative values are ignored when set."""
        return round(pygame.mixer.music.get_volume() * MAX_VOLUME)

    @volume.setter
    def volume(self, value: int) -> None:
        if value < 0:
            return
        pygame.mixer.music.set_volume(_clamped(value) / MAX_VOLUME)

    def load_media(self, path: str) -> None:
        """Use the music at ``path`` from now on."""
        self._path = self._store.get(path)

    def volume_up(self, step: int = 1) -> None:
        """Raise the volume by ``step``."""
        self.volume = self.volume + step

    def volume_down(self, step: int = 1) -> None:
        """Lower the volume by ``step``."""
        self.volume = self.volume - step

    def play(self, loop: int = -1) -> None:
        """Play ``loop`` times, or forever with -1, stopping other music."""
        if self._path is None:
            return
        pygame.mixer.music.load(self._path)
        pygame.mixer.music.play(loops=_music_loops(loop))

    def fade_in(self, tick: int, loop: int = -1) -> None:
        """Play with a fade-in lasting ``tick`` milliseconds."""
        if self._path is None:
            return
        pygame.mixer.music.load(self._path)
        pygame.mixer.music.play(loops=_music_loops(loop), fade_ms=int(tick))

    def fade_out(self, tick: int) -> None:
        """Fade the playing music out over ``tick`` milliseconds."""
        pygame.mixer.music.fadeout(int(tick))

    def pause(self) -> None:
        """Pause the playing music."""
        pygame.mixer.music.pause()

    def resume(self) -> None:
        """Resume paused music."""
        pygame.mixer.music.unpause()


class SFX:
    """A short sound effect held in memory; several may play at once.

    Volumes range from 0 (mute) to 128 (loudest) per sound.
    """

    _store: AssetStore[Optional[pygame.mixer.Sound]] = AssetStore(_load_chunk)

    def __init__(self, path: str) -> None:
        self._chunk = self._store.get(path)

    @property
    def chunk(self) -> Optional[pygame.mixer.Sound]:
        """The loaded sound, or None if it failed to load."""
        return self._chunk

    @property
    def volume(self) -> int:
        """Volume in 0-128, or -1 when no sound is loaded."""
        if self._chunk is None:
            return -1
        return round(self._chunk.get_volume() * MAX_VOLUME)

    @volume.setter
    def volume(self, value: int) -> None:
        if self._chunk is None or value < 0:
            return
        self._chunk.set_volume(_clamped(value) / MAX_VOLUME)

    def load_media(self, path: str) -> None:
        """Use the sound at ``path`` from now on."""
        self._chunk = self._store.get(path)

    def volume_up(self, step: int = 1) -> None:
        """Raise the volume by ``step``."""
        self.volume = self.volume + step

    def volume_down(self, step: int = 1) -> None:
        """Lower the volume by ``step``."""
        self.volume = self.volume - step

    def play(self, loop: int = 0, duration: int = -1) -> Optional[pygame.mixer.Channel]:
        """Play, repeating ``loop`` extra times, for at most ``duration`` ms.

        A negative ``duration`` plays the whole sound. Returns the channel
        used, or None if nothing was played.
        """
        if self._chunk is None:
            return None
        return self._chunk.play(loops=int(loop), maxtime=max(int(duration), 0))

    def fade_in(
        self, tick: int, loop: int = -1, duration: int = -1
    ) -> Optional[pygame.mixer.Channel]:
        """Play with a fade-in lasting ``tick`` milliseconds."""
        if self._chunk is None:
            return None
        return self._chunk.play(
            loops=int(loop), maxtime=max(int(duration), 0), fade_ms=int(tick)
        )