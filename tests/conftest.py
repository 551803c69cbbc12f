"""Shared pytest fixtures for FocusTimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from focustimer.settings import Settings
from focustimer.timer.engine import TimerEngine
from focustimer.timer.session import TimerSession


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep settings and cached sounds out of the real home directory."""
    monkeypatch.setattr("focustimer.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr(
        "focustimer.settings.SETTINGS_PATH", tmp_path / "settings.json",
    )
    monkeypatch.setattr("focustimer.audio.sounds.SOUNDS_DIR", tmp_path / "sounds")
    yield


@pytest.fixture
def session():
    """Fresh pure state machine, no Qt involved."""
    return TimerSession()


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine; tests drive it through ``_on_tick()``."""
    eng = TimerEngine(parent=None)
    yield eng
    eng.shutdown()


@pytest.fixture
def settings():
    """Settings with sound off so widget tests stay silent."""
    return Settings(sound_enabled=False)
