# tunedeck

A small desktop audio player. Keep a playlist of MP3, WAV and FLAC files,
play, pause and skip between them, set the volume and seek within the
current track. The playlist is saved when the window closes and loaded
again on the next start.

Sound goes through the pygame mixer, and the window is built with tkinter,
which has to be available in your Python installation.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running

```
tunedeck
```

or, with a playlist file of your choice:

```
tunedeck my-playlist.txt
```

Without an argument the playlist is read from `tracks.txt` in the current
directory, if that file is there. When the window closes, the playlist is
written back to the same file.

In the window:

- The `+` button opens a file chooser for `*.mp3`, `*.wav` and `*.flac`
  files. The length of the chosen file is read when it is added; WAV files
  are measured from their header, other files through the pygame mixer, and
  a file whose length cannot be read is stored with length 0.
- Clicking a row in the list plays that track.
- The play/pause button toggles playback of the selected track and shows
  `⏸` while playing and `▶` while paused.
- `⏭` and `⏮` move to the next or previous track, wrapping around at
  either end of the list.
- The `−` button removes the selected track and stops playback.
- The seek bar runs from 0 to the track's length in seconds, follows the
  playing position every half second, and can be dragged to jump within
  the track. The time beside it is shown as minutes:seconds.
- The volume slider runs from 0 to 100 and starts at 50.

If an image named `background.jpg` sits next to `tunedeck/mainwindow.py`, it
is scaled to cover the window and used as its background; otherwise the
window keeps its plain background.

## Playlist file

The playlist is plain UTF-8 text, one track per line, with the file path and
the length in whole seconds separated by a semicolon:

```
/music/track1.mp3;100
/music/track2.mp3;200
```

Empty lines are ignored, and a missing or unreadable length is read as 0.

## Using it from code

The playlist logic lives in `tunedeck.controller.PlayerController`, which
drives a `tunedeck.player.Player` and reports changes through `Signal`
objects that other code can connect to:

```python
from tunedeck.controller import PlayerController
from tunedeck.player import Player

with Player() as player:
    controller = PlayerController(player)
    controller.track_loaded.connect(print)      # prints "track1.mp3"
    controller.add_track("/music/track1.mp3", 100)
    controller.save_tracks("tracks.txt")
```

`PlayerController` offers:

- `load_tracks(filename)` and `save_tracks(filename)` for the playlist file;
- `add_track(file_path, duration_sec)`, `remove_track(index)`,
  `clear_tracks()` and `delete_track()` (removes the current track);
- `on_item_clicked(index)`, `play_next()`, `play_prev()`, `play_or_stop()`
  and `set_volume(value)` for playback;
- `tracks`, `track_count`, `track(index)` (raises `IndexError` when out of
  range), the settable `current_index` (−1 when nothing is selected) and
  `player`.

Its signals are `track_loaded` (file name), `track_deleted` (row index),
`current_row_changed` (row index) and `play_state_changed` (`True` when
playing). Operations on an invalid current index log a warning and reset
`current_index` to −1 instead of raising.

`Player` loads one file at a time with `load_file(path)`, and has `play()`,
`pause()`, `set_volume(volume)` on a 0 to 100 scale, a `position` property
in whole seconds that can also be assigned to seek, and `close()`. It raises
`tunedeck.player.PlayerError` when no audio output can be opened.

Each entry in the playlist is a `tunedeck.track.Track`, a frozen dataclass
holding the file `path` and its `length` in seconds.

`tunedeck.mainwindow` also provides `format_time(seconds)`, which turns
seconds into `m:ss`, and `get_duration(file_path)`.

## What it does not do

The playing position is estimated from the pygame mixer's elapsed time, and
seeking depends on what the mixer supports for the file's format. There is
no automatic advance when a track finishes, no shuffle or repeat mode, and
the volume setting is not saved between runs.