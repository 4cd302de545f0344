"""
Game configuration: matrix size, preview length, timing intervals and host
settings, optionally loaded from a YAML file.
"""

from __future__ import annotations

import dataclasses
import pathlib
from dataclasses import dataclass
from typing import Any

import yaml

# Tallest extent of any spawn-orientation shape above its center.
_SPAWN_HEADROOM = 1


@dataclass
class GameConfig:
    """Tunable constants for a game and its hosts.

    Attributes:
        width: Matrix columns.
        height: Matrix rows, including the hidden buffer.
        visible_height: Rows shown by the hosts (the bottom rows).
        preview_length: Number of upcoming kinds in the preview queue.
        fall_interval_ms: Time between gravity steps while falling.
        lock_interval_ms: Lock delay once the piece is grounded.
        seed: Seed for the piece bag; None for a random game.
        cell_size: Pixel size of a cell in the pygame host.
        fps: Frame rate of the pygame host.
    """

    width: int = 10
    height: int = 22
    visible_height: int = 20
    preview_length: int = 5
    fall_interval_ms: int = 500
    lock_interval_ms: int = 1000
    seed: int | None = None
    cell_size: int = 30
    fps: int = 60

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check the values are usable.

        Raises:
            ValueError: If a size or interval is not positive, or the matrix
                is too small to spawn a piece.
        """
        for name in ("width", "height", "visible_height", "preview_length",
                     "fall_interval_ms", "lock_interval_ms", "cell_size", "fps"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if self.width < 4:
            raise ValueError(f"width must be at least 4, got {self.width}")
        if self.height < 2 + _SPAWN_HEADROOM:
            raise ValueError(f"height must be at least {2 + _SPAWN_HEADROOM}, got {self.height}")
        if self.visible_height > self.height:
            raise ValueError(
                f"visible_height ({self.visible_height}) exceeds height ({self.height})"
            )
        if self.seed is not None and (not isinstance(self.seed, int) or isinstance(self.seed, bool)):
            raise ValueError(f"seed must be an integer or null, got {self.seed!r}")

    @property
    def spawn_center(self) -> tuple[int, int]:
        """(col, row) where new pieces appear: in the hidden buffer rows."""
        return ((self.width - 1) // 2, self.height - 2)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> GameConfig:
        """Build a config from a mapping, rejecting unknown keys.

        Args:
            data: Mapping of field names to values; None means all defaults.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        data = dict(data or {})
        known = {field.name for field in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(config_path: str | pathlib.Path) -> GameConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        The validated GameConfig.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the file is not a mapping or holds invalid values.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        data = yaml.safe_load(f)
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Config file must hold a mapping: {config_path}")
    return GameConfig.from_dict(data)
