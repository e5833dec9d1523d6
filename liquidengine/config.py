"""Plain-text game settings and input bindings."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Union

PathLike = Union[str, Path]

DEFAULT_SETTINGS = (
    "-- GAME SETTINGS\n"
    "frame_limit 60\n"
    "screen_width 1920\n"
    "screen_height 1080\n"
    "fullscreen false\n"
    "particles_enabled true\n"
    "enable_vsync false\n"
    "gui_scale 1.0\n"
    "\n"
    "-- VOLUME SETTINGS\n"
    "master 100.0\n"
    "music 100.0\n"
    "ambiance 100.0\n"
    "dialogue 100.0\n"
)

DEFAULT_BINDINGS = (
    "-- KEYBOARD BINDINGS\n"
    "keyboard_move_up W\n"
    "keyboard_move_left A\n"
    "keyboard_move_down S\n"
    "keyboard_move_right D\n"
    "keyboard_interact F\n"
    "keyboard_open_menu Escape\n"
    "\n"
    "-- GAMEPAD BINDINGS\n"
    "gamepad_interact X\n"
    "gamepad_open_menu Start\n"
)

_TRUE_WORDS = {"true", "1", "yes", "on"}
_FALSE_WORDS = {"false", "0", "no", "off"}


def parse_config(text: str) -> Dict[str, str]:
    """Parse ``name value`` lines into a dict.

    Blank lines and lines starting with ``--`` are skipped.  The value is
    everything after the first run of whitespace; a later line with the
    same name replaces an earlier one.
    """
    values: Dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("--"):
            continue
        parts = stripped.split(None, 1)
        values[parts[0]] = parts[1].strip() if len(parts) > 1 else ""
    return values


def _read_or_create(path: PathLike, default_text: str) -> str:
    file_path = Path(path)
    if not file_path.exists():
        file_path.write_text(default_text, encoding="utf-8")
    return file_path.read_text(encoding="utf-8")


def _as_int(values: Mapping[str, str], key: str) -> int:
    raw = values.get(key)
    if raw is None or raw == "":
        return 0
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"setting {key!r} is not an integer: {raw!r}") from None


def _as_float(values: Mapping[str, str], key: str) -> float:
    raw = values.get(key)
    if raw is None or raw == "":
        return 0.0
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"setting {key!r} is not a number: {raw!r}") from None


def _as_bool(values: Mapping[str, str], key: str) -> bool:
    raw = values.get(key)
    if raw is None or raw == "":
        return False
    word = raw.lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"setting {key!r} is not a boolean: {raw!r}")


class Settings:
    """General game settings: frame limit, screen, graphics flags and volumes.

    Settings missing from the parsed text count as zero or False.
    """

    def __init__(self, default_text: str = DEFAULT_SETTINGS) -> None:
        self.default_text = default_text
        self.values: Dict[str, str] = {}
        self.frame_limit = 0
        self.screen_width = 0
        self.screen_height = 0
        self.fullscreen = False
        self.particles_enabled = False
        self.enable_vsync = False
        self.gui_scale = 0.0
        self.volume_master = 0.0
        self.volume_music = 0.0
        self.volume_ambiance = 0.0
        self.volume_dialogue = 0.0

    def parse_file(self, path: PathLike) -> None:
        """Load settings from a file, writing the defaults there first if it is missing."""
        self.parse_string(_read_or_create(path, self.default_text))

    def parse_string(self, text: str) -> None:
        """Load settings from ``name value`` text."""
        self.values = parse_config(text)
        self._assign()

    def _assign(self) -> None:
        values = self.values
        self.frame_limit = _as_int(values, "frame_limit")
        self.screen_width = _as_int(values, "screen_width")
        self.screen_height = _as_int(values, "screen_height")
        self.fullscreen = _as_bool(values, "fullscreen")
        self.particles_enabled = _as_bool(values, "particles_enabled")
        self.enable_vsync = _as_bool(values, "enable_vsync")
        self.gui_scale = _as_float(values, "gui_scale")
        self.volume_master = _as_float(values, "master")
        self.volume_music = _as_float(values, "music")
        self.volume_ambiance = _as_float(values, "ambiance")
        self.volume_dialogue = _as_float(values, "dialogue")


def _no_conversion(name: str) -> int:
    """Map any key name to code 0, rejecting values that are not names."""
    if not isinstance(name, str):
        raise TypeError(f"key name must be a string, not {type(name).__name__}")
    return 0


class Bindings:
    """Named keyboard, mouse and gamepad bindings mapped to integer codes.

    ``convert`` turns a key name such as ``"W"`` into the code a back end
    uses; the default maps every name to 0.  When ``convert`` is None,
    parsing does nothing.
    """

    def __init__(
        self,
        convert: Optional[Callable[[str], int]] = _no_conversion,
        default_text: str = DEFAULT_BINDINGS,
    ) -> None:
        self.convert = convert
        self.default_text = default_text
        self._bindings: Dict[str, int] = {}

    @property
    def bindings(self) -> Dict[str, int]:
        return dict(self._bindings)

    def parse_file(self, path: PathLike) -> None:
        """Load bindings from a file, writing the defaults there first if it is missing."""
        if self.convert is None:
            return
        self.parse_string(_read_or_create(path, self.default_text))

    def parse_string(self, text: str) -> None:
        """Load bindings from ``name key`` text, converting each key to its code."""
        if self.convert is None:
            return
        convert = self.convert
        self._bindings = {
            name: convert(value) for name, value in parse_config(text).items()
        }

    def binding_value(self, name: str) -> int:
        """Code bound to a name, or 0 if the name is not bound."""
        return self._bindings.get(name, 0)