#!/usr/bin/env python3
"""
Tests for the project controller
Load/save workflow, error reporting and recent files
"""

import pytest

from led_sprite_editor.constants import KEY_RECENT_FILES
from led_sprite_editor.controllers.project_controller import ProjectController
from led_sprite_editor.controllers.selection_controller import SelectionController
from led_sprite_editor.exceptions import FileOperationError
from led_sprite_editor.recent_files import RecentFiles
from led_sprite_editor.settings_manager import SettingsManager


@pytest.fixture
def selection(qtbot, event_bus):
    return SelectionController(event_bus)


@pytest.fixture
def controller(selection, settings):
    return ProjectController(selection, settings=settings)


@pytest.fixture
def errors(controller):
    messages = []
    controller.error_occurred.connect(messages.append)
    return messages


@pytest.mark.integration
class TestLoadProject:
    """Test loading through the controller"""

    def test_load_replaces_sequence(self, controller, selection, project_path):
        loaded = []
        controller.project_changed.connect(loaded.append)

        assert controller.load_project(project_path) is True

        assert controller.sequence.name == "demo"
        assert selection.selected_frame is controller.sequence.first()
        assert loaded == [controller.sequence]
        assert controller.recent_files == [project_path.absolute()]
        assert controller.window_title == f"demo - {project_path.absolute()}"

    def test_failed_load_keeps_current_project(self, controller, errors, tmp_path):
        before = controller.sequence
        bad = tmp_path / "bad.sprite"
        bad.write_text("animationSpeed=16\n", encoding="utf-8")

        assert controller.load_project(bad) is False

        assert controller.sequence is before
        assert controller.recent_files == []
        assert len(errors) == 1
        assert errors[0].startswith("Invalid file format")

    def test_missing_file_reports_not_found(self, controller, errors, tmp_path):
        assert controller.load_project(tmp_path / "missing.sprite") is False
        assert errors == [f"File not found during load {tmp_path / 'missing.sprite'}"]


@pytest.mark.integration
class TestSaveProject:
    """Test saving through the controller"""

    def test_save_without_file_is_refused(self, controller):
        assert controller.save_project() is False

    def test_save_as_then_save(self, controller, selection, tmp_path):
        saved = []
        controller.project_saved.connect(saved.append)
        path = tmp_path / "new.sprite"

        selection.fill_frame()
        assert controller.needs_save
        assert controller.save_project_as(path) is True
        assert not controller.needs_save

        selection.clear_frame()
        assert controller.save_project() is True

        assert saved == [str(path), str(path)]
        assert controller.recent_files == [path]

    def test_failed_save_reports_and_stays_dirty(self, controller, selection, errors, tmp_path):
        selection.fill_frame()
        assert controller.save_project_as(tmp_path / "missing_dir" / "x.sprite") is False
        assert controller.needs_save
        assert len(errors) == 1


@pytest.mark.unit
class TestProjectSettings:
    """Test new project, speed presets and export"""

    def test_new_project(self, controller, selection):
        controller.sequence.first().fill()
        sequence = controller.new_project("fresh")
        assert controller.sequence is sequence
        assert selection.selected_frame is sequence.first()
        assert not controller.needs_save
        assert controller.window_title == "fresh"

    @pytest.mark.parametrize("preset, interval", [("60 FPS", 16), ("30 FPS", 32), ("15 FPS", 48)])
    def test_speed_presets(self, controller, preset, interval):
        controller.set_animation_preset(preset)
        assert controller.sequence.animation_interval_ms == interval

    def test_export(self, controller):
        assert controller.export_source_text().startswith("const uint8_t data[1][8] = {")


@pytest.mark.integration
class TestRecentFilesWorkflow:
    """Test recent files persistence through the controller"""

    def test_recent_files_loaded_from_settings(self, selection, settings, project_path):
        settings.set(KEY_RECENT_FILES, str(project_path))
        controller = ProjectController(selection, settings=settings)
        assert controller.recent_files == [project_path]

    def test_shutdown_persists_recent_files(self, controller, settings, project_path, selection):
        changes = []
        controller.recent_files_changed.connect(lambda: changes.append(True))
        controller.load_project(project_path)

        assert controller.shutdown() is True
        assert changes == [True]
        assert RecentFiles.load(SettingsManager(settings_file=settings.settings_file)).files == [
            project_path.absolute()
        ]

    def test_shutdown_failure_is_reported(self, controller, monkeypatch):
        def fail():
            raise FileOperationError("disk gone")

        monkeypatch.setattr(controller.settings, "save_settings", fail)
        assert controller.shutdown() is False
