import pytest

from tunedeck.controller import PlayerController, Signal


class FakePlayer:
    def __init__(self):
        self.calls = []
        self.played = False

    def load_file(self, path):
        self.calls.append(("load", path))

    def play(self):
        self.played = True
        self.calls.append(("play",))

    def pause(self):
        self.played = False
        self.calls.append(("pause",))

    def set_volume(self, value):
        self.calls.append(("volume", value))


@pytest.fixture
def pc():
    return PlayerController(FakePlayer())


def recorder(signal):
    received = []
    signal.connect(lambda *args: received.append(args))
    return received


def test_signal_delivers_arguments_to_all_slots():
    signal = Signal()
    first, second = recorder(signal), recorder(signal)
    signal.emit(1, "a")
    assert first == [(1, "a")]
    assert second == [(1, "a")]


def test_add_track_increases_count(pc):
    before = pc.track_count
    pc.add_track("/music/track1.mp3", 100)
    assert pc.track_count == before + 1


def test_add_track_correct_path(pc):
    pc.add_track("/music/track1.mp3", 100)
    assert pc.track(0).path == "/music/track1.mp3"


def test_add_track_correct_length(pc):
    pc.add_track("/music/track1.mp3", 123)
    assert pc.track(0).length == 123


def test_remove_track_decreases_count(pc):
    pc.add_track("/music/track1.mp3", 100)
    pc.add_track("/music/track2.mp3", 200)
    before = pc.track_count
    pc.remove_track(0)
    assert pc.track_count == before - 1


def test_remove_track_correct_track_remains(pc):
    pc.add_track("/music/track1.mp3", 100)
    pc.add_track("/music/track2.mp3", 200)
    pc.remove_track(0)
    assert pc.track(0).path == "/music/track2.mp3"


def test_remove_track_out_of_range_ignored(pc):
    pc.add_track("/music/track1.mp3", 100)
    pc.remove_track(5)
    assert pc.track_count == 1


def test_clear_tracks_empties_list(pc):
    pc.add_track("/music/track1.mp3", 100)
    pc.clear_tracks()
    assert pc.track_count == 0


def test_set_current_index_sets_value(pc):
    pc.current_index = 2
    assert pc.current_index == 2


def test_get_current_index_returns_value(pc):
    pc.current_index = 5
    assert pc.current_index == 5


def test_signal_track_loaded_emitted(pc):
    received = recorder(pc.track_loaded)
    pc.add_track("/music/track1.mp3", 100)
    assert len(received) == 1


def test_signal_track_loaded_correct_name(pc):
    received = recorder(pc.track_loaded)
    pc.add_track("/music/track1.mp3", 100)
    assert received[0] == ("track1.mp3",)


def test_signal_track_deleted_emitted(pc):
    pc.add_track("/music/track1.mp3", 100)
    pc.current_index = 0
    received = recorder(pc.track_deleted)
    pc.delete_track()
    assert len(received) == 1


def test_signal_track_deleted_correct_index(pc):
    pc.add_track("/music/track1.mp3", 100)
    pc.current_index = 0
    received = recorder(pc.track_deleted)
    pc.delete_track()
    assert received[0] == (0,)
    assert pc.track_count == 0
    assert pc.current_index == -1


def test_delete_track_invalid_index_resets(pc):
    pc.add_track("/music/track1.mp3", 100)
    pc.current_index = 3
    received = recorder(pc.track_deleted)
    pc.delete_track()
    assert received == []
    assert pc.track_count == 1
    assert pc.current_index == -1


def test_play_next_empty_list_no_crash(pc):
    pc.play_next()
    assert pc.current_index == -1
    assert pc.player.calls == []


def test_play_prev_empty_list_no_crash(pc):
    pc.play_prev()
    assert pc.current_index == -1
    assert pc.player.calls == []


def test_play_or_stop_empty_list_no_crash(pc):
    pc.play_or_stop()
    assert pc.current_index == -1
    assert pc.player.calls == []


def test_play_next_advances_and_wraps(pc):
    pc.add_track("/music/a.mp3", 1)
    pc.add_track("/music/b.mp3", 2)
    rows = recorder(pc.current_row_changed)
    pc.play_next()
    pc.play_next()
    pc.play_next()
    assert rows == [(0,), (1,), (0,)]
    assert pc.player.calls[-2:] == [("load", "/music/a.mp3"), ("play",)]


def test_play_prev_wraps_to_last(pc):
    pc.add_track("/music/a.mp3", 1)
    pc.add_track("/music/b.mp3", 2)
    pc.current_index = 0
    pc.play_prev()
    assert pc.current_index == 1
    pc.play_prev()
    assert pc.current_index == 0


def test_play_or_stop_toggles(pc):
    pc.add_track("/music/a.mp3", 1)
    pc.on_item_clicked(0)
    states = recorder(pc.play_state_changed)
    pc.play_or_stop()
    pc.play_or_stop()
    assert states == [(False,), (True,)]
    assert pc.player.played is True


def test_on_item_clicked_selects_track(pc):
    pc.add_track("/music/a.mp3", 1)
    pc.add_track("/music/b.mp3", 2)
    rows = recorder(pc.current_row_changed)
    pc.on_item_clicked(1)
    assert pc.current_index == 1
    assert rows == [(1,)]
    assert ("load", "/music/b.mp3") in pc.player.calls


def test_on_item_clicked_invalid_index(pc):
    pc.add_track("/music/a.mp3", 1)
    pc.current_index = 0
    pc.on_item_clicked(7)
    assert pc.current_index == -1


def test_set_volume_forwards(pc):
    pc.set_volume(42)
    assert pc.player.calls == [("volume", 42)]


def test_track_out_of_range_raises(pc):
    with pytest.raises(IndexError):
        pc.track(0)


def test_save_tracks_creates_file(pc, tmp_path):
    pc.add_track("/music/track1.mp3", 100)
    fname = tmp_path / "list.txt"
    pc.save_tracks(fname)
    assert fname.read_text(encoding="utf-8") == "/music/track1.mp3;100\n"


def test_load_tracks_loads_correctly(pc, tmp_path):
    pc.add_track("/music/track1.mp3", 100)
    pc.add_track("/music/track2.mp3", 200)
    fname = tmp_path / "list.txt"
    pc.save_tracks(fname)
    pc2 = PlayerController(FakePlayer())
    pc2.load_tracks(fname)
    assert pc2.track_count == 2
    assert pc2.track(0).path == "/music/track1.mp3"
    assert pc2.track(1).length == 200


def test_load_tracks_skips_blank_and_defaults_length(pc, tmp_path):
    fname = tmp_path / "list.txt"
    fname.write_text("/m/a.mp3\n\n/m/b.mp3;abc\n/m/c.mp3;7\n", encoding="utf-8")
    names = recorder(pc.track_loaded)
    pc.load_tracks(fname)
    assert [(t.path, t.length) for t in pc.tracks] == [
        ("/m/a.mp3", 0),
        ("/m/b.mp3", 0),
        ("/m/c.mp3", 7),
    ]
    assert names == [("a.mp3",), ("b.mp3",), ("c.mp3",)]


def test_load_tracks_missing_file_keeps_playlist(pc, tmp_path):
    pc.add_track("/music/track1.mp3", 100)
    pc.load_tracks(tmp_path / "absent.txt")
    assert pc.track_count == 1