import pytest

from conftest import FakeConsole, FakeDisplay, FakeSource, make_frames
from errors import InvalidInput
from playback import PlaybackController, parse_frame_number


def test_load_reads_metadata_and_first_frame(player, console):
    assert player.is_loaded
    assert player.position == 0
    assert player.total_frames == 10
    assert player.fps == 30.0
    assert player.frame[0, 0, 0] == 0
    assert "Video loaded successfully:" in console.lines
    assert "  Resolution: 32x24" in console.lines


def test_load_failure_leaves_controller_unopened(console):
    p = PlaybackController(FakeSource(make_frames(3), fail_open=True),
                           FakeDisplay(), console)
    assert not p.load("missing.mp4")
    assert not p.is_loaded
    assert p.frame is None
    assert console.lines[-1].startswith("Error: Cannot open video file")


def test_load_failure_on_unreadable_first_frame(console):
    src = FakeSource(make_frames(3))
    src.bad_reads.add(0)
    p = PlaybackController(src, FakeDisplay(), console)
    assert not p.load("broken.mp4")
    assert not p.is_loaded
    assert not src.opened


def test_load_rejects_empty_video(console):
    p = PlaybackController(FakeSource([]), FakeDisplay(), console)
    assert not p.load("empty.mp4")


@pytest.mark.parametrize("n", range(10))
def test_seek_lands_on_target(player, n):
    assert player.seek(n)
    assert player.position == n
    assert player.frame[0, 0, 0] == n


@pytest.mark.parametrize("target", [-1, 10])
def test_seek_out_of_range_fails(player, target):
    player.seek(3)
    assert not player.seek(target)
    assert player.position == 3
    assert player.frame[0, 0, 0] == 3


def test_seek_read_failure_keeps_position(player, source):
    source.bad_seeks.add(7)
    assert not player.seek(7)
    assert player.position == 0


def test_retreat_at_start_fails(player):
    assert not player.retreat()
    assert player.position == 0


def test_advance_at_end_fails(player):
    player.seek(9)
    assert not player.advance()
    assert player.position == 9


def test_nine_advances_reach_last_frame(player):
    for _ in range(9):
        assert player.advance()
    assert player.position == 9
    assert player.frame[0, 0, 0] == 9
    assert not player.advance()
    assert player.position == 9


def test_advance_read_failure_keeps_position(player, source):
    source.bad_reads.add(1)
    assert not player.advance()
    assert player.position == 0
    assert player.frame[0, 0, 0] == 0


def test_seek_then_retreat(player):
    assert player.seek(5)
    assert player.retreat()
    assert player.position == 4
    assert player.frame[0, 0, 0] == 4


def test_retreat_failure_does_not_move_position(player, source):
    player.seek(5)
    source.bad_seeks.add(4)
    assert not player.retreat()
    assert player.position == 5
    assert player.frame[0, 0, 0] == 5


def test_advance_after_seek_continues_sequentially(player):
    player.seek(3)
    assert player.advance()
    assert player.position == 4
    assert player.frame[0, 0, 0] == 4


def test_jump_to_valid_entry(player, console):
    assert player.jump_to("7")
    assert player.position == 6
    assert console.lines[-1] == "Jumped to frame 7"


@pytest.mark.parametrize("entry", ["11", "0", "abc", "", None])
def test_jump_to_rejects_bad_entry(player, console, entry):
    player.seek(2)
    assert not player.jump_to(entry)
    assert player.position == 2
    assert console.lines[-1] == "Invalid frame number!"


def test_prompt_jump_uses_console(source):
    console = FakeConsole(answers=["10"])
    p = PlaybackController(source, FakeDisplay(), console)
    p.load("ten_frames.mp4")
    assert p.prompt_jump()
    assert p.position == 9
    assert console.prompts == ["Enter frame number (1-10): "]


def test_parse_frame_number():
    assert parse_frame_number(" 3 ", 5) == 2
    with pytest.raises(InvalidInput):
        parse_frame_number("6", 5)
    with pytest.raises(InvalidInput):
        parse_frame_number("1.5", 5)


def test_report_progress(player, console):
    player.seek(4)
    player.report_progress()
    assert console.statuses[-1] == "Frame: 5/10 (50.0%)"


def test_render_current_shows_overlay_surface(player):
    surf = player.render_current()
    assert surf.get_size() == (32, 24)
    assert player.display.shown == [surf]
    # the held frame is not drawn on
    assert player.frame.max() == 0


def test_render_current_without_frame_is_noop(source, console):
    p = PlaybackController(source, FakeDisplay(), console)
    assert p.render_current() is None
    assert p.display.shown == []


def test_close_resets_state(player, source):
    player.seek(4)
    player.close()
    assert not player.is_loaded
    assert player.position == 0
    assert not source.opened
