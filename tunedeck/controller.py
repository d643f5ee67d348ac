"""Playlist management and playback control."""

from __future__ import annotations

import logging
from pathlib import Path

from .player import Player
from .track import Track

log = logging.getLogger(__name__)


class Signal:
    """A list of callables notified together."""

    def __init__(self):
        self._slots = []

    def connect(self, slot):
        """Register a callable to be invoked on every emit."""
        self._slots.append(slot)

    def emit(self, *args):
        """Call every connected slot with the given arguments."""
        for slot in list(self._slots):
            slot(*args)


def _parse_length(text):
    try:
        return int(text.strip())
    except ValueError:
        return 0


class PlayerController:
    """Keeps the playlist and drives a player through it."""

    def __init__(self, player=None):
        self._player = player if player is not None else Player()
        self._tracks: list[Track] = []
        self._is_played = False
        self._current_index = -1
        self.track_loaded = Signal()
        self.track_deleted = Signal()
        self.current_row_changed = Signal()
        self.play_state_changed = Signal()

    def _append(self, track):
        self._tracks.append(track)
        self.track_loaded.emit(Path(track.path).name)

    def load_tracks(self, filename):
        """Replace the playlist with the one stored in a file, if it can be read."""
        try:
            handle = open(filename, encoding="utf-8")
        except OSError:
            return
        with handle:
            self._tracks.clear()
            for raw in handle:
                line = raw.rstrip("\r\n")
                if not line:
                    continue
                parts = line.split(";")
                length = _parse_length(parts[1]) if len(parts) > 1 else 0
                self._append(Track(parts[0], length))

    def add_track(self, file_path, duration_sec):
        """Append a track to the playlist."""
        self._append(Track(str(file_path), int(duration_sec)))

    def save_tracks(self, filename):
        """Write the playlist as path;length lines."""
        try:
            with open(filename, "w", encoding="utf-8") as out:
                for track in self._tracks:
                    out.write(f"{track.path};{track.length}\n")
        except OSError as exc:
            log.warning("could not save playlist to %s: %s", filename, exc)

    def _index_valid(self, index):
        return 0 <= index < len(self._tracks)

    def _invalid_index(self, message):
        log.warning(message)
        self._current_index = -1

    def delete_track(self):
        """Remove the current track, stopping playback."""
        if not self._tracks:
            return
        if self._index_valid(self._current_index):
            self._player.pause()
            self._is_played = False
            deleted = self._current_index
            del self._tracks[deleted]
            self._current_index = -1
            self.track_deleted.emit(deleted)
        else:
            self._invalid_index("cannot delete track: invalid index")

    def set_volume(self, value):
        if self._player is not None:
            self._player.set_volume(value)

    def play_next(self):
        """Move to the next track, wrapping to the first."""
        if not self._tracks:
            return
        if self._current_index + 1 <= len(self._tracks) - 1:
            self._player.pause()
            self._current_index += 1
        else:
            self._current_index = 0
        self._play_track_at_index(self._current_index)

    def play_prev(self):
        """Move to the previous track, wrapping to the last."""
        if not self._tracks:
            return
        if self._current_index - 1 >= 0:
            self._player.pause()
            self._current_index -= 1
        else:
            self._current_index = len(self._tracks) - 1
        self._play_track_at_index(self._current_index)

    def _play_track_at_index(self, index):
        if not self._tracks:
            return
        if self._index_valid(index):
            self.current_row_changed.emit(index)
            self._player.load_file(self._tracks[index].path)
            self._player.play()
            self._is_played = True
        else:
            self._invalid_index("cannot play track: invalid index")

    def play_or_stop(self):
        """Toggle between playing and paused for the current track."""
        if not self._index_valid(self._current_index):
            self._invalid_index("cannot play track: invalid index")
            return
        if not self._is_played:
            self._player.play()
            self._is_played = True
            self.play_state_changed.emit(True)
        else:
            self._player.pause()
            self._is_played = False
            self.play_state_changed.emit(False)

    def on_item_clicked(self, index):
        """Select and play the track at the given row."""
        if self._index_valid(index):
            self._current_index = index
            self._player.load_file(self._tracks[index].path)
            self._player.play()
            self._is_played = True
            self.current_row_changed.emit(index)
        else:
            self._invalid_index("cannot select track: invalid index")

    @property
    def tracks(self):
        return tuple(self._tracks)

    @property
    def track_count(self):
        return len(self._tracks)

    def track(self, index):
        """Return the track at index; raise IndexError when out of range."""
        if not self._index_valid(index):
            raise IndexError(f"track index {index} out of range")
        return self._tracks[index]

    def remove_track(self, index):
        """Remove the track at index; out-of-range indices are ignored."""
        if self._index_valid(index):
            del self._tracks[index]

    def clear_tracks(self):
        self._tracks.clear()

    @property
    def current_index(self):
        return self._current_index

    @current_index.setter
    def current_index(self, index):
        self._current_index = index

    @property
    def player(self):
        return self._player