"""Saved dialog settings and the summary shown of them."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from os import PathLike
from pathlib import Path

DEFAULT_MODE = 1002

_LAYOUT = struct.Struct("<6I")


@dataclass
class Settings:
    """The values a settings profile stores, six unsigned 32-bit fields."""

    mode: int = DEFAULT_MODE
    options: int = 0
    counter: int = 0
    elapsed: int = 0
    h_scroll: int = 0
    v_scroll: int = 0

    def to_bytes(self) -> bytes:
        """Encode as six little-endian 32-bit words."""
        try:
            return _LAYOUT.pack(*astuple(self))
        except struct.error as exc:
            raise ValueError(f"settings out of range: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> Settings:
        """Decode the first six words of ``data``."""
        if len(data) < _LAYOUT.size:
            raise ValueError(
                f"settings need {_LAYOUT.size} bytes, got {len(data)}"
            )
        return cls(*_LAYOUT.unpack_from(data))


@dataclass
class Snapshot:
    """The state of the settings dialog at one moment."""

    combo_select: str = ""
    combo_saved: bool = False
    option: str = ""
    option_type: str = ""
    counter: int = 0
    elapsed: int = 0
    h_scroll: int = 0
    v_scroll: int = 0

    def render(self) -> list[str]:
        """The summary lines, one per field."""
        note = "" if self.combo_saved else " (*no save)"
        return [
            f"combo select [{self.combo_select}] {note}",
            f"option type [{self.option_type}]",
            f"options [{self.option}]",
            f"counter [{int(self.counter)}]",
            f"timer elapsed [{int(self.elapsed)}]",
            f"horizontal scroll [{int(self.h_scroll)}]",
            f"vertical scroll [{int(self.v_scroll)}]",
        ]


def directory_exists(path: str | PathLike[str]) -> bool:
    """True when ``path`` names an existing directory."""
    return Path(path).is_dir()


def load_settings(path: str | PathLike[str]) -> Settings:
    """Read a profile, creating an empty file and returning defaults if absent."""
    target = Path(path)
    target.touch(exist_ok=True)
    data = target.read_bytes()
    if not data:
        return Settings()
    return Settings.from_bytes(data)


def save_settings(path: str | PathLike[str], settings: Settings) -> None:
    """Write a profile, replacing any earlier contents."""
    Path(path).write_bytes(settings.to_bytes())