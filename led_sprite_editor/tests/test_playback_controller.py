#!/usr/bin/env python3
"""
Tests for animation playback
"""

import pytest

from led_sprite_editor.controllers.playback_controller import PlaybackController
from led_sprite_editor.controllers.selection_controller import SelectionController


@pytest.fixture
def selection(qtbot, event_bus, sequence):
    return SelectionController(event_bus, sequence)


@pytest.fixture
def playback(selection):
    controller = PlaybackController(selection)
    yield controller
    controller.stop()


@pytest.mark.unit
class TestPlaybackState:
    """Test start/stop bookkeeping"""

    def test_initially_stopped_with_outline(self, playback):
        assert not playback.is_running
        assert playback.show_previous_frame_outline

    def test_start_hides_outline(self, playback, sequence):
        sequence.animation_interval_ms = 48
        playback.start()
        assert playback.is_running
        assert not playback.show_previous_frame_outline
        assert playback.interval_ms == 48

    def test_stop_restores_outline(self, playback):
        playback.start()
        playback.stop()
        assert not playback.is_running
        assert playback.show_previous_frame_outline

    def test_stop_when_stopped_is_noop(self, playback):
        states = []
        playback.playback_state_changed.connect(states.append)
        playback.stop()
        assert states == []

    def test_toggle(self, playback):
        states = []
        playback.playback_state_changed.connect(states.append)
        assert playback.toggle() is True
        assert playback.toggle() is False
        assert states == [True, False]

    def test_restart_picks_up_new_interval(self, playback, sequence):
        playback.start()
        sequence.animation_interval_ms = 100
        playback.start()
        assert playback.interval_ms == 100
        assert playback.is_running


@pytest.mark.unit
class TestOutlineFrame:
    """Test the ghost frame shown while editing"""

    def test_outline_is_previous_frame(self, playback, selection, three_frames):
        selection.select(three_frames[1])
        assert playback.outline_frame() is three_frames[0]

    def test_no_outline_on_first_frame(self, playback):
        assert playback.outline_frame() is None

    def test_no_outline_while_playing(self, playback, selection, three_frames):
        selection.select(three_frames[2])
        playback.start()
        assert playback.outline_frame() is None


@pytest.mark.integration
def test_timer_advances_and_wraps(qtbot, playback, selection, three_frames):
    """The timer walks through all frames and wraps to the first"""
    seen = []
    selection.event_bus.subscribe(lambda event: seen.append(event.frame))
    selection.sequence.animation_interval_ms = 5

    playback.start()
    qtbot.waitUntil(lambda: len(seen) >= 4, timeout=2000)
    playback.stop()

    assert seen[:4] == [three_frames[1], three_frames[2], three_frames[0], three_frames[1]]
