"""The main player window and the command that opens it."""

from __future__ import annotations

import argparse
import logging
import tkinter as tk
import wave
from pathlib import Path
from tkinter import filedialog

import pygame
from PIL import Image, ImageTk

from .controller import PlayerController
from .player import Player

log = logging.getLogger(__name__)

DEFAULT_VOLUME = 50
PLAYLIST_FILENAME = "tracks.txt"
BACKGROUND_IMAGE = Path(__file__).with_name("background.jpg")
SLIDER_INTERVAL_MS = 500
PLAY_SYMBOL = "▶"
PAUSE_SYMBOL = "⏸"
AUDIO_FILETYPES = [("Audio files", "*.mp3 *.wav *.flac")]


def format_time(seconds):
    """Format a position in seconds as minutes:seconds."""
    minutes, rest = divmod(int(seconds), 60)
    return f"{minutes}:{rest:02d}"


def _wav_duration(path):
    with wave.open(str(path), "rb") as stream:
        rate = stream.getframerate()
        if rate <= 0:
            return 0
        return int(stream.getnframes() / rate)


def _mixer_duration(path):
    started_here = False
    if not pygame.mixer.get_init():
        pygame.mixer.init()
        started_here = True
    try:
        return int(pygame.mixer.Sound(str(path)).get_length())
    finally:
        if started_here:
            pygame.mixer.quit()


def get_duration(file_path):
    """Return the length of an audio file in whole seconds, 0 if it cannot be read."""
    path = Path(file_path)
    try:
        if path.suffix.lower() == ".wav":
            try:
                return _wav_duration(path)
            except wave.Error:
                pass
        return _mixer_duration(path)
    except (OSError, EOFError, pygame.error) as exc:
        log.warning("could not read duration of %s: %s", file_path, exc)
        return 0


def _cover_size(image_size, target_size):
    """Smallest size with the image's aspect ratio that covers the target."""
    image_w, image_h = image_size
    target_w, target_h = target_size
    scale = max(target_w / image_w, target_h / image_h)
    return max(1, round(image_w * scale)), max(1, round(image_h * scale))


def change_background(window, background_path):
    """Fill a window with an image scaled to cover it; return the label or None."""
    try:
        with Image.open(background_path) as source:
            image = source.copy()
    except (OSError, ValueError) as exc:
        log.warning("could not load background %s: %s", background_path, exc)
        return None
    window.update_idletasks()
    size = (max(window.winfo_width(), 1), max(window.winfo_height(), 1))
    scaled = image.resize(_cover_size(image.size, size))
    photo = ImageTk.PhotoImage(scaled, master=window)
    label = getattr(window, "_background_label", None)
    if label is None:
        label = tk.Label(window, borderwidth=0)
        label.place(x=0, y=0, relwidth=1, relheight=1)
        window._background_label = label
    label.configure(image=photo)
    label.image = photo
    label.lower()
    return label


class MainWindow:
    """Playlist view with transport buttons, a position slider and a volume slider."""

    def __init__(self, master, playlist_path=PLAYLIST_FILENAME):
        self.master = master
        self._playlist_path = playlist_path
        self._timer_id = None
        self._updating_slider = False
        self._closed = False
        self.controller = PlayerController(Player())

        self._build_widgets()
        change_background(self.master, BACKGROUND_IMAGE)

        self.volume_slider.set(DEFAULT_VOLUME)
        self.volume_label.configure(text=str(DEFAULT_VOLUME))
        self.volume_slider.configure(command=self._on_volume_changed)

        self.controller.track_deleted.connect(self.delete_track_from_list)
        self.controller.track_loaded.connect(self.add_track_to_list)
        self.controller.current_row_changed.connect(self.set_current_row)
        self.controller.play_state_changed.connect(self.on_play_or_stop_ui)

        self.controller.load_tracks(self._playlist_path)

    def _build_widgets(self):
        frame = tk.Frame(self.master)
        frame.grid(row=0, column=0, sticky="nsew", padx=8, pady=8)
        self.master.columnconfigure(0, weight=1)
        self.master.rowconfigure(0, weight=1)
        frame.columnconfigure(0, weight=1)
        frame.rowconfigure(0, weight=1)

        self.track_list = tk.Listbox(frame, exportselection=False, height=12)
        self.track_list.grid(row=0, column=0, columnspan=2, sticky="nsew")
        self.track_list.bind("<<ListboxSelect>>", self._on_item_clicked)

        self.position_slider = tk.Scale(
            frame, from_=0, to=0, orient=tk.HORIZONTAL, showvalue=False,
            command=self._on_slider_moved,
        )
        self.position_slider.grid(row=1, column=0, sticky="ew")
        self.time_label = tk.Label(frame, text=format_time(0))
        self.time_label.grid(row=1, column=1)

        buttons = tk.Frame(frame)
        buttons.grid(row=2, column=0, columnspan=2, pady=4)
        self.prev_button = tk.Button(buttons, text="⏮", command=self.controller.play_prev)
        self.play_or_stop_button = tk.Button(
            buttons, text=PLAY_SYMBOL, command=self.controller.play_or_stop
        )
        self.next_button = tk.Button(buttons, text="⏭", command=self.controller.play_next)
        self.add_button = tk.Button(buttons, text="+", command=self._on_add_clicked)
        self.delete_button = tk.Button(buttons, text="−", command=self.controller.delete_track)
        for column, button in enumerate(
            (self.prev_button, self.play_or_stop_button, self.next_button,
             self.add_button, self.delete_button)
        ):
            button.grid(row=0, column=column, padx=2)

        volume = tk.Frame(frame)
        volume.grid(row=3, column=0, columnspan=2, sticky="ew")
        volume.columnconfigure(0, weight=1)
        self.volume_slider = tk.Scale(
            volume, from_=0, to=100, orient=tk.HORIZONTAL, showvalue=False
        )
        self.volume_slider.grid(row=0, column=0, sticky="ew")
        self.volume_label = tk.Label(volume, text="")
        self.volume_label.grid(row=0, column=1)

    def _on_volume_changed(self, value):
        level = int(float(value))
        self.volume_label.configure(text=str(level))
        self.controller.set_volume(level)

    def _on_add_clicked(self):
        file_path = filedialog.askopenfilename(
            parent=self.master, title="Choose a track", filetypes=AUDIO_FILETYPES
        )
        if file_path:
            self.controller.add_track(file_path, get_duration(file_path))

    def _on_slider_moved(self, value):
        if self._updating_slider:
            return
        position = int(float(value))
        self.controller.player.position = position
        self.time_label.configure(text=format_time(position))

    def _set_slider(self, position):
        self._updating_slider = True
        try:
            self.position_slider.set(position)
        finally:
            self._updating_slider = False

    def _on_item_clicked(self, _event=None):
        selection = self.track_list.curselection()
        if not selection:
            return
        index = selection[0]
        self.controller.on_item_clicked(index)
        if 0 <= index < self.controller.track_count:
            self.position_slider.configure(to=self.controller.track(index).length)
        if self._timer_id is not None:
            self.master.after_cancel(self._timer_id)
        self._timer_id = self.master.after(SLIDER_INTERVAL_MS, self._on_timer)

    def _on_timer(self):
        self._timer_id = None
        if self._closed:
            return
        if 0 <= self.controller.current_index < self.controller.track_count:
            position = self.controller.player.position
            self._set_slider(position)
            self.time_label.configure(text=format_time(position))
        self._timer_id = self.master.after(SLIDER_INTERVAL_MS, self._on_timer)

    def add_track_to_list(self, name):
        """Append a row to the visible playlist."""
        self.track_list.insert(tk.END, name)

    def delete_track_from_list(self, index):
        """Remove a row from the visible playlist if it exists."""
        if 0 <= index < self.track_list.size():
            self.track_list.delete(index)

    def set_current_row(self, index):
        """Highlight the given row if it exists."""
        if 0 <= index < self.track_list.size():
            self.track_list.selection_clear(0, tk.END)
            self.track_list.selection_set(index)
            self.track_list.activate(index)
            self.track_list.see(index)

    def on_play_or_stop_ui(self, is_playing):
        """Show pause while playing and play while paused."""
        self.play_or_stop_button.configure(text=PAUSE_SYMBOL if is_playing else PLAY_SYMBOL)

    def close(self):
        """Save the playlist and release the audio device."""
        if self._closed:
            return
        self._closed = True
        if self._timer_id is not None:
            self.master.after_cancel(self._timer_id)
            self._timer_id = None
        self.controller.save_tracks(self._playlist_path)
        self.controller.player.close()


def main(argv=None):
    """Open the player window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="tunedeck", description="A small audio player.")
    parser.add_argument(
        "playlist", nargs="?", default=PLAYLIST_FILENAME,
        help="playlist file to load on start and save on exit",
    )
    args = parser.parse_args(argv)

    root = tk.Tk()
    root.title("TuneDeck")
    window = MainWindow(root, args.playlist)

    def on_close():
        window.close()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_close)
    root.mainloop()
    return 0