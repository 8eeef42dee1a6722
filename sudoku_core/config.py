"""Configuration defaults and JSON loading."""

from __future__ import annotations
import json
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union

# Inclusive number of cells blanked per difficulty.
DEFAULT_REMOVAL_RANGES: Dict[str, Tuple[int, int]] = {
    "easy": (33, 37),
    "medium": (41, 45),
    "hard": (50, 55),
}

# Candidate digits tried before a search is abandoned.
DEFAULT_MAX_ATTEMPTS = 20_000_000

TOTAL_CELLS = 81

RangeTable = Tuple[Tuple[str, Tuple[int, int]], ...]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class SudokuConfig:
    """
    Tunable settings for generation and solving.

    ``removal_ranges`` may be given as a mapping; it is stored as a sorted
    tuple of ``(name, (min, max))`` pairs so the config stays immutable
    and hashable.
    """
    removal_ranges: Union[Mapping[str, Any], RangeTable] = tuple(
        sorted(DEFAULT_REMOVAL_RANGES.items())
    )
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self):
        object.__setattr__(self, "removal_ranges", _normalize_ranges(self.removal_ranges))
        validate_config(self)

    def removal_range(self, difficulty: Any) -> Tuple[int, int]:
        """Inclusive (min, max) of cells to blank for a difficulty."""
        name = getattr(difficulty, "value", difficulty)
        try:
            return dict(self.removal_ranges)[name]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {name!r}") from None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_attempts": self.max_attempts,
            "removal_ranges": {k: list(v) for k, v in self.removal_ranges},
        }


def _normalize_ranges(ranges: Any) -> RangeTable:
    """Turn a mapping (or pair sequence) of ranges into a sorted tuple of pairs."""
    if isinstance(ranges, Mapping):
        items = ranges.items()
    else:
        try:
            items = [(name, bounds) for name, bounds in ranges]
        except (TypeError, ValueError):
            raise ValueError(f"removal_ranges must be a mapping, got {ranges!r}") from None

    table = []
    for name, bounds in items:
        if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
            raise ValueError(f"Range for {name!r} must be [min, max], got {bounds!r}")
        table.append((name, tuple(bounds)))
    return tuple(sorted(table))


def validate_config(config: SudokuConfig) -> None:
    """Raise ValueError if any setting is out of range."""
    if not _is_int(config.max_attempts) or config.max_attempts <= 0:
        raise ValueError(f"max_attempts must be a positive integer, got {config.max_attempts!r}")

    names = [name for name, _ in config.removal_ranges]
    unknown = set(names) - set(DEFAULT_REMOVAL_RANGES)
    if unknown:
        raise ValueError(f"Unknown difficulty keys: {sorted(unknown, key=str)}")

    for name, (low, high) in config.removal_ranges:
        if not (_is_int(low) and _is_int(high)):
            raise ValueError(f"Range for {name!r} must hold integers, got {[low, high]!r}")
        if not 0 <= low <= high <= TOTAL_CELLS:
            raise ValueError(
                f"Range for {name!r} must satisfy 0 <= min <= max <= {TOTAL_CELLS}, got {[low, high]!r}"
            )


def load_config(path: Optional[str] = None) -> SudokuConfig:
    """
    Load settings from a JSON file, falling back to defaults.

    Expected layout::

        {"max_attempts": 1000000,
         "removal_ranges": {"easy": [30, 35], "hard": [50, 55]}}

    Keys that are missing keep their default values.
    """
    if path is None:
        return DEFAULT_CONFIG

    with open(path, "r") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must hold a JSON object")

    overrides = data.get("removal_ranges", {})
    if not isinstance(overrides, dict):
        raise ValueError(f"removal_ranges must be an object, got {overrides!r}")

    ranges = dict(DEFAULT_REMOVAL_RANGES)
    ranges.update(overrides)

    return replace(
        DEFAULT_CONFIG,
        removal_ranges=ranges,
        max_attempts=data.get("max_attempts", DEFAULT_CONFIG.max_attempts),
    )


DEFAULT_CONFIG = SudokuConfig()
