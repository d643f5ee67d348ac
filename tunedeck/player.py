"""Audio playback on top of the pygame mixer."""

from __future__ import annotations

import logging

import pygame

log = logging.getLogger(__name__)


class PlayerError(RuntimeError):
    """Raised when the audio backend cannot be started."""


class Player:
    """Plays one audio file at a time, with pause, volume and seeking."""

    def __init__(self):
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            raise PlayerError(f"could not initialize audio output: {exc}") from exc
        self._loaded: str | None = None
        self._paused = False
        self._offset = 0.0
        self._closed = False

    def load_file(self, file_path):
        """Load a file and start it, unless the player is paused."""
        try:
            pygame.mixer.music.load(str(file_path))
            pygame.mixer.music.play()
        except pygame.error as exc:
            log.warning("could not load %s: %s", file_path, exc)
            self._loaded = None
            return
        self._loaded = str(file_path)
        self._offset = 0.0
        if self._paused:
            pygame.mixer.music.pause()

    def play(self):
        """Resume playback."""
        self._paused = False
        if self._loaded is not None:
            pygame.mixer.music.unpause()

    def pause(self):
        """Pause playback."""
        self._paused = True
        if self._loaded is not None:
            pygame.mixer.music.pause()

    def set_volume(self, volume):
        """Set the volume on a 0 to 100 scale; values outside are clamped."""
        level = min(max(int(volume), 0), 100)
        pygame.mixer.music.set_volume(level / 100)

    @property
    def position(self):
        """Current playback position in whole seconds, 0 when nothing plays."""
        if self._closed or self._loaded is None:
            return 0
        elapsed_ms = pygame.mixer.music.get_pos()
        if elapsed_ms < 0:
            return 0
        return int(self._offset + elapsed_ms / 1000)

    @position.setter
    def position(self, seconds):
        if self._closed or self._loaded is None:
            return
        try:
            pygame.mixer.music.play(start=float(seconds))
        except pygame.error as exc:
            log.warning("could not seek to %s: %s", seconds, exc)
            return
        self._offset = float(seconds)
        if self._paused:
            pygame.mixer.music.pause()

    def close(self):
        """Stop playback and release the audio device."""
        if self._closed:
            return
        self._closed = True
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
            pygame.mixer.quit()
        self._loaded = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()