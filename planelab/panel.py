"""A settings panel whose named profiles are kept as files in a directory."""

from __future__ import annotations

import enum
from os import PathLike
from pathlib import Path

from .settings import Settings, Snapshot, load_settings, save_settings

DEFAULT_PROFILE = "default"
PROFILE_SUFFIX = ".data"
OPTION_NAMES = ("Option 1", "Option 2", "Option 3")
SCROLL_MIN = 0
SCROLL_MAX = 255
DEFAULT_ELAPSED = 100

_LINE_STEP = 4
_PAGE_STEP = 16


class OptionMode(enum.IntEnum):
    """How the option check boxes are shown, numbered as the radio buttons."""

    ACTIVE = 1002
    HIDE = 1003
    DEACTIVE = 1004

    @property
    def label(self) -> str:
        return self.name.lower()


class ScrollCode(enum.IntEnum):
    """Scroll bar notifications."""

    LINE_UP = 0
    LINE_DOWN = 1
    PAGE_UP = 2
    PAGE_DOWN = 3
    THUMB_POSITION = 4
    THUMB_TRACK = 5
    TOP = 6
    BOTTOM = 7
    END_SCROLL = 8


class PanelError(Exception):
    """Raised when a profile cannot be loaded, saved or deleted."""


def _clamp(position: int) -> int:
    return max(SCROLL_MIN, min(SCROLL_MAX, int(position)))


def scroll(position: int, code: ScrollCode | int, track: int = 0) -> int:
    """Return the scroll position after ``code``; ``track`` is the thumb position."""
    code = ScrollCode(code)
    if code is ScrollCode.THUMB_TRACK:
        return _clamp(track)
    delta = {
        ScrollCode.LINE_UP: -_LINE_STEP,
        ScrollCode.LINE_DOWN: _LINE_STEP,
        ScrollCode.PAGE_UP: -_PAGE_STEP,
        ScrollCode.PAGE_DOWN: _PAGE_STEP,
    }.get(code, 0)
    if delta == 0:
        return position
    return _clamp(position + delta)


class SettingsPanel:
    """Mode, options, a counting timer and two scroll bars, saved as profiles.

    Every event appends a line to :attr:`log`.
    """

    def __init__(self, data_dir: str | PathLike[str], selected: int = 0) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        names = {DEFAULT_PROFILE}
        names.update(
            p.stem for p in self.data_dir.glob(f"*{PROFILE_SUFFIX}") if p.is_file()
        )
        self._profiles = sorted(names)
        self.selected = selected if 0 <= selected < len(self._profiles) else 0

        self.log: list[str] = []
        self.mode = OptionMode.ACTIVE
        self.options = [False] * len(OPTION_NAMES)
        self.counter = 0
        self.elapsed = DEFAULT_ELAPSED
        self.h_scroll = 0
        self.v_scroll = 0
        self.timer_id = 0
        self.running = False

        try:
            self._deserialize(self._profiles[self.selected])
            outcome = "success"
        except PanelError:
            outcome = "fail"
        self.log.append(f"--Initialize Main Dlg, load [{outcome}]")

    @property
    def current(self) -> str:
        """The name of the selected profile."""
        return self._profiles[self.selected]

    def profiles(self) -> list[str]:
        """The profile names in the order they are listed."""
        return list(self._profiles)

    def _path(self, name: str) -> Path:
        return self.data_dir / f"{name}{PROFILE_SUFFIX}"

    def _deserialize(self, name: str) -> None:
        try:
            stored = load_settings(self._path(name))
        except (OSError, ValueError) as exc:
            raise PanelError(f"cannot load profile {name!r}: {exc}") from exc
        try:
            self.mode = OptionMode(stored.mode)
        except ValueError:
            self.mode = OptionMode.ACTIVE
        self.options = [
            bool(stored.options & (1 << i)) for i in range(len(OPTION_NAMES))
        ]
        self.counter = stored.counter
        self.elapsed = stored.elapsed
        self.h_scroll = _clamp(stored.h_scroll)
        self.v_scroll = _clamp(stored.v_scroll)

    def _serialize(self, name: str) -> None:
        bits = sum(1 << i for i, checked in enumerate(self.options) if checked)
        stored = Settings(
            mode=int(self.mode),
            options=bits,
            counter=self.counter,
            elapsed=self.elapsed,
            h_scroll=self.h_scroll,
            v_scroll=self.v_scroll,
        )
        try:
            save_settings(self._path(name), stored)
        except (OSError, ValueError) as exc:
            raise PanelError(f"cannot save profile {name!r}: {exc}") from exc

    def load(self, name: str) -> None:
        """Select the listed profile ``name`` and load its values."""
        if name not in self._profiles:
            raise PanelError(f"unknown profile {name!r}")
        index = self._profiles.index(name)
        self.running = False
        try:
            self._deserialize(name)
        except PanelError:
            self.log.append(f"ComboBox - {index}, {name}, load [fail]")
            raise
        self.selected = index
        self.log.append(f"ComboBox - {index}, {name}, load [success]")

    def save(self, name: str) -> None:
        """Store the current values as ``name``, adding it to the list if new."""
        if name not in self._profiles:
            self._profiles.append(name)
        index = self._profiles.index(name)
        self.running = False
        try:
            self._serialize(name)
        except PanelError:
            self.log.append(f"Button Save Setting - {index}, {name}, save [fail]")
            raise
        self.selected = index
        self.log.append(f"Button Save Setting - {index}, {name}, save [success]")

    def delete(self, name: str) -> None:
        """Remove a profile and its file, then load the one listed before it."""
        if name not in self._profiles:
            raise PanelError(f"invalid setting name {name!r}")
        index = self._profiles.index(name)
        if index == 0:
            raise PanelError(f"cannot erase the {name!r} setting")
        self._path(name).unlink(missing_ok=True)
        del self._profiles[index]
        self.selected = index - 1
        try:
            self._deserialize(self.current)
        except PanelError:
            pass
        self.running = False
        self.log.append(f"Button Delete Setting - {self.selected}, {name}")

    def set_mode(self, mode: OptionMode | int) -> None:
        """Change how the options are shown."""
        chosen = OptionMode(mode)
        if chosen == self.mode:
            return
        self.log.append(f"RadioBtn - {chosen.label.capitalize()}")
        self.mode = chosen

    def set_option(self, index: int, checked: bool) -> None:
        """Check or clear one of the option boxes."""
        if not 0 <= index < len(self.options):
            raise IndexError(f"no option {index}")
        self.options[index] = bool(checked)
        text = self.options_text()
        self.log.append(f"CheckBox - {text or 'n/a'}")

    def options_text(self) -> str:
        """The names of the checked options, comma separated."""
        return ", ".join(
            label for label, checked in zip(OPTION_NAMES, self.options) if checked
        )

    def start_timer(self) -> None:
        """Start counting; an elapsed time of zero becomes the default."""
        if self.running:
            return
        if self.elapsed == 0:
            self.elapsed = DEFAULT_ELAPSED
        self.timer_id += 1
        self.running = True
        self.log.append(
            f"Start Timer - ID : {self.timer_id}, Elapsed : {self.elapsed}"
        )

    def stop_timer(self) -> None:
        """Stop counting, keeping the count."""
        if not self.running:
            return
        self.running = False
        self.log.append(f"Stop Timer - ID : {self.timer_id}")

    def reset_timer(self) -> None:
        """Stop counting and set the count back to zero."""
        self.counter = 0
        self.running = False
        self.log.append(f"Reset Timer - ID : {self.timer_id}")

    def tick(self) -> int:
        """Advance the count by one if the timer runs; return the count."""
        if self.running:
            self.counter += 1
        return self.counter

    def scroll_horizontal(self, code: ScrollCode | int, track: int = 0) -> int:
        """Move the horizontal scroll bar and return its position."""
        self.h_scroll = scroll(self.h_scroll, code, track)
        if ScrollCode(code) is ScrollCode.END_SCROLL:
            self.log.append(f"Horizontal Scroll - pos : {self.h_scroll}")
        return self.h_scroll

    def scroll_vertical(self, code: ScrollCode | int, track: int = 0) -> int:
        """Move the vertical scroll bar and return its position."""
        self.v_scroll = scroll(self.v_scroll, code, track)
        if ScrollCode(code) is ScrollCode.END_SCROLL:
            self.log.append(f"Vertical Scroll - pos : {self.v_scroll}")
        return self.v_scroll

    def snapshot(self) -> Snapshot:
        """The panel's current state for display."""
        return Snapshot(
            combo_select=self.current,
            combo_saved=True,
            option=self.options_text(),
            option_type=self.mode.label,
            counter=self.counter,
            elapsed=self.elapsed,
            h_scroll=self.h_scroll,
            v_scroll=self.v_scroll,
        )