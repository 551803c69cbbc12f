"""Tests for settings persistence and phase-change sound synthesis."""

from __future__ import annotations

import io
import json
import wave

import pytest

import focustimer.settings as settings_mod
from focustimer.settings import Settings, load_settings, save_settings
from focustimer.audio.sounds import (
    SoundManager,
    SOUND_NAMES,
    _generate_focus_start,
    _generate_break_bell,
    _generate_session_complete,
)


GENERATORS = [
    _generate_focus_start,
    _generate_break_bell,
    _generate_session_complete,
]


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS
# ═══════════════════════════════════════════════════════════════════════


class TestSettingsDefaults:
    def test_tick_interval(self):
        assert Settings().tick_interval_ms == 1000

    def test_long_press(self):
        assert Settings().long_press_ms == 500

    def test_animation(self):
        assert Settings().progress_animation_ms == 1000

    def test_sound(self):
        s = Settings()
        assert s.sound_enabled is True
        assert s.sound_volume == 70

    def test_log_level(self):
        assert Settings().log_level == "INFO"


class TestSettingsPersistence:
    def test_round_trip(self):
        save_settings(Settings(long_press_ms=800, sound_volume=20, always_on_top=True))
        loaded = load_settings()
        assert loaded.long_press_ms == 800
        assert loaded.sound_volume == 20
        assert loaded.always_on_top is True

    def test_missing_file_returns_defaults(self):
        assert load_settings() == Settings()

    def test_invalid_json_returns_defaults(self):
        settings_mod.SETTINGS_PATH.write_text("{not json", encoding="utf-8")
        assert load_settings() == Settings()

    def test_non_object_json_returns_defaults(self):
        settings_mod.SETTINGS_PATH.write_text("[1, 2]", encoding="utf-8")
        assert load_settings() == Settings()

    def test_extra_keys_ignored(self):
        settings_mod.SETTINGS_PATH.write_text(
            json.dumps({"sound_volume": 40, "theme": "neon"}), encoding="utf-8",
        )
        loaded = load_settings()
        assert loaded.sound_volume == 40
        assert not hasattr(loaded, "theme")

    def test_file_is_indented_json(self):
        save_settings(Settings())
        text = settings_mod.SETTINGS_PATH.read_text(encoding="utf-8")
        assert text.endswith("\n")
        assert json.loads(text)["tick_interval_ms"] == 1000


# ═══════════════════════════════════════════════════════════════════════
#  SOUND SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════


class TestSoundGeneration:

    @pytest.mark.parametrize("gen_fn", GENERATORS)
    def test_generator_produces_wav(self, gen_fn):
        data = gen_fn()
        assert isinstance(data, bytes)
        assert data[:4] == b"RIFF"

    @pytest.mark.parametrize("gen_fn", GENERATORS)
    def test_wav_is_parseable(self, gen_fn):
        with wave.open(io.BytesIO(gen_fn()), "rb") as wf:
            assert wf.getnchannels() == 1
            assert wf.getsampwidth() == 2
            assert wf.getframerate() == 44100
            assert wf.getnframes() > 0


@pytest.mark.usefixtures("qapp")
class TestSoundManager:
    def test_wav_files_generated(self, tmp_path):
        SoundManager(parent=None, sounds_dir=tmp_path)
        for name in SOUND_NAMES:
            path = tmp_path / f"{name}.wav"
            assert path.exists(), f"Missing WAV: {name}"
            assert path.stat().st_size > 100

    def test_existing_files_reused(self, tmp_path):
        SoundManager(parent=None, sounds_dir=tmp_path)
        path = tmp_path / "break_start.wav"
        before = path.stat().st_mtime_ns
        SoundManager(parent=None, sounds_dir=tmp_path)
        assert path.stat().st_mtime_ns == before

    def test_volume_clamps(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.set_volume(30)
        assert mgr.volume == 30
        mgr.set_volume(200)
        assert mgr.volume == 100
        mgr.set_volume(-10)
        assert mgr.volume == 0

    def test_set_enabled(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.set_enabled(False)
        assert mgr.enabled is False

    def test_play_unknown_name_no_crash(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.play("fanfare")

    def test_play_while_disabled_no_crash(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.set_enabled(False)
        mgr.play("break_start")

    def test_all_sounds_loaded(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        assert set(mgr._effects) == set(SOUND_NAMES)
