"""Phase-change sounds synthesised with numpy, played with QSoundEffect.

Each sound is generated once as a 16-bit mono WAV and cached on disk.

Sound names
-----------
- ``focus_start``: three ascending notes when a preset starts
- ``break_start``: soft bell when the work phase runs out
- ``session_complete``: short arpeggio when the break runs out
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path
from typing import Callable

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..settings import APP_SUPPORT_DIR

logger = logging.getLogger(__name__)

SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SOUND_NAMES = (
    "focus_start",
    "break_start",
    "session_complete",
)

SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _envelope(length: int, attack: int, release: int, sustain: float = 0.6) -> np.ndarray:
    """Attack / sustain / release envelope (durations in samples)."""
    env = np.full(length, sustain, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, sustain, a)
    r = min(release, length - a)
    if r > 0:
        env[length - r:] = np.linspace(sustain, 0.0, r)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _silence(duration_s: float) -> np.ndarray:
    return np.zeros(int(SAMPLE_RATE * duration_s))


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert float samples (-1..1) to 16-bit PCM WAV bytes."""
    int_samples = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


def _notes(freqs: list[float], note_dur: float, gap: float, tail: float) -> np.ndarray:
    parts: list[np.ndarray] = []
    for i, freq in enumerate(freqs):
        dur = tail if i == len(freqs) - 1 else note_dur
        tone = _sine(freq, dur) * 0.5
        parts.append(tone * _envelope(len(tone), attack=80, release=len(tone) // 2))
        parts.append(_silence(gap))
    return np.concatenate(parts)


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_focus_start() -> bytes:
    """C5 → E5 → G5."""
    return _to_wav_bytes(_notes([523.25, 659.25, 783.99], 0.12, 0.03, 0.2))


def _generate_break_bell() -> bytes:
    """A4 with a soft octave overtone, slow decay."""
    duration = 1.0
    tone = _sine(440.0, duration) * 0.35 + _sine(880.0, duration) * 0.08
    env = _envelope(
        len(tone),
        attack=int(SAMPLE_RATE * 0.08),
        release=int(SAMPLE_RATE * 0.7),
        sustain=0.8,
    )
    return _to_wav_bytes(tone * env)


def _generate_session_complete() -> bytes:
    """C5 → E5 → G5 → C6, last note held."""
    return _to_wav_bytes(
        _notes([523.25, 659.25, 783.99, 1046.50], 0.10, 0.02, 0.35)
    )


_GENERATORS: dict[str, Callable[[], bytes]] = {
    "focus_start": _generate_focus_start,
    "break_start": _generate_break_bell,
    "session_complete": _generate_session_complete,
}


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════════


class SoundManager(QObject):
    """Generates, caches and plays the phase-change sounds.

    Usage::

        mgr = SoundManager(parent=self)
        mgr.set_volume(70)
        mgr.play("break_start")
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 0.7  # 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[str, QSoundEffect] = {}

        self._ensure_wav_files()
        self._load_effects()

    # ── public API ────────────────────────────────────────────────────

    def set_volume(self, level: int) -> None:
        """Set volume (0-100)."""
        self._volume = max(0, min(level, 100)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play(self, name: str) -> None:
        """Play a sound by name.  No-op if disabled or name unknown."""
        if not self._enabled:
            return
        effect = self._effects.get(name)
        if effect is None:
            logger.debug("Unknown sound %r", name)
            return
        effect.play()

    @property
    def volume(self) -> int:
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        self._sounds_dir.mkdir(parents=True, exist_ok=True)
        for name, gen_fn in _GENERATORS.items():
            path = self._sounds_dir / f"{name}.wav"
            if not path.exists():
                path.write_bytes(gen_fn())
                logger.debug("Generated %s", path)

    def _load_effects(self) -> None:
        for name in SOUND_NAMES:
            path = self._sounds_dir / f"{name}.wav"
            if path.exists():
                effect = QSoundEffect(self)
                effect.setSource(QUrl.fromLocalFile(str(path)))
                effect.setVolume(self._volume)
                self._effects[name] = effect
