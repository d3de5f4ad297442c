"""
Shared pytest fixtures and configuration for sprite editor tests
"""

import os

import pytest

# Qt must never try to open a display during tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("QT_LOGGING_RULES", "*.debug=false")

from led_sprite_editor.events import EventBus  # noqa: E402
from led_sprite_editor.models.frame import Frame  # noqa: E402
from led_sprite_editor.models.sequence import Sequence  # noqa: E402
from led_sprite_editor.settings_manager import SettingsManager  # noqa: E402


@pytest.fixture
def blank_frame():
    """An all-zero 8x8 frame"""
    return Frame()


@pytest.fixture
def full_frame():
    """An 8x8 frame with every pixel lit"""
    return Frame(columns=[0xFF] * 8)


@pytest.fixture
def diagonal_frame():
    """Pixel (i, i) lit for every column"""
    return Frame(columns=[1 << i for i in range(8)])


@pytest.fixture
def three_frames():
    """Three distinct frames A, B, C"""
    return [Frame(columns=[value] * 8) for value in (0x01, 0x02, 0x04)]


@pytest.fixture
def sequence(three_frames):
    """A clean three-frame sequence"""
    return Sequence("demo", list(three_frames))


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def settings(tmp_path):
    """Settings manager writing into the test's temp directory"""
    return SettingsManager("test_app", settings_file=tmp_path / "settings" / "settings.properties")


@pytest.fixture
def project_path(tmp_path):
    """A valid two-frame project file"""
    path = tmp_path / "demo.sprite"
    path.write_text(
        "#Automatically generated, do not alter.\n"
        "name=demo\n"
        "image.0=0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0, 0x0\n"
        "image.1=0xff, 0xff, 0xff, 0xff, 0xff, 0xff, 0xff, 0xff\n"
        "animationSpeed=32\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def make_files(tmp_path):
    """Factory creating readable files named file0, file1, ..."""

    def _make(count):
        paths = []
        for i in range(count):
            path = tmp_path / f"file{i}.sprite"
            path.write_text("name=x\n", encoding="utf-8")
            paths.append(path)
        return paths

    return _make
