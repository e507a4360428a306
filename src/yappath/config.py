"""Transform configuration records and their YAML loader."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from pathlib import Path as FilePath
from typing import Any, Dict, List, Optional, Sequence

import yaml

from yappath.path import Path
from yappath.transforms import offset_convex_path, smooth_path, subdivide_path


def _check_count(name: str, value: Any, minimum: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < minimum:
        raise ValueError(f"{name} must be an integer >= {minimum}, got {value!r}")


def _check_number(name: str, value: Any, positive: bool = False) -> None:
    if value is None:
        return
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if positive and value <= 0:
        raise ValueError(f"{name} must be positive, got {value!r}")


@dataclass
class SubdivideConfig:
    """Resample a path at ``n_segments`` evenly spaced offsets."""

    n_segments: int

    def __post_init__(self) -> None:
        _check_count("n_segments", self.n_segments, 1)


@dataclass
class SmoothConfig:
    """Kernel radius and iteration count for ``smooth_path``."""

    radius: int = 1
    iterations: int = 1

    def __post_init__(self) -> None:
        _check_count("radius", self.radius, 0)
        _check_count("iterations", self.iterations, 0)


@dataclass
class OffsetConfig:
    """Parameters for ``offset_convex_path``.

    ``offset_amt`` and ``target_length`` are mutually exclusive.
    """

    target_direction: Sequence[float] = (0.0, 0.0)
    target_direction_factor: float = 0.0
    margin: Optional[float] = None
    min_spacing: Optional[float] = None
    offset_amt: Optional[float] = None
    target_length: Optional[float] = None

    def __post_init__(self) -> None:
        if self.offset_amt is not None and self.target_length is not None:
            raise ValueError("offset_amt and target_length are mutually exclusive")
        _check_number("target_direction_factor", self.target_direction_factor)
        _check_number("margin", self.margin)
        _check_number("min_spacing", self.min_spacing, positive=True)
        _check_number("offset_amt", self.offset_amt)
        _check_number("target_length", self.target_length)
        self.target_direction = tuple(self.target_direction)


@dataclass
class TransformConfig:
    """Optional subdivide, smooth, and offset sections."""

    subdivide: Optional[SubdivideConfig] = None
    smooth: Optional[SmoothConfig] = None
    offset: Optional[OffsetConfig] = None

    def apply(self, path: Path) -> Path:
        """Subdivide and then smooth ``path`` in place, per the sections present."""
        if self.subdivide is not None:
            subdivide_path(path, self.subdivide.n_segments)
        if self.smooth is not None:
            smooth_path(path, self.smooth.radius, self.smooth.iterations)
        return path

    def offset_samples(self, samples: Sequence[Sequence[float]]) -> List[list]:
        """Run the offset section over ``samples``; without one, return copies."""
        if self.offset is None:
            return [list(s) for s in samples]
        o = self.offset
        return offset_convex_path(
            samples,
            o.target_direction,
            o.target_direction_factor,
            margin=o.margin,
            min_spacing=o.min_spacing,
            offset_amt=o.offset_amt,
            target_length=o.target_length,
        )


_ALIASES = {"n_iterations": "iterations"}

_SECTIONS = {
    "subdivide": SubdivideConfig,
    "smooth": SmoothConfig,
    "offset": OffsetConfig,
}


def _snake(key: str) -> str:
    key = re.sub(r"(?<!^)(?=[A-Z])", "_", str(key)).lower()
    return _ALIASES.get(key, key)


def _parse_section(name: str, raw: Any, cls: type) -> Any:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"{name} section must be a mapping, got {type(raw)!r}")
    known = {f.name for f in fields(cls)}
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        norm = _snake(key)
        if norm not in known:
            raise ValueError(f"unknown key in {name} section: {key!r}")
        values[norm] = value
    try:
        return cls(**values)
    except TypeError as exc:
        raise ValueError(f"incomplete {name} section: {exc}") from exc


def parse_transform_config(data: Dict[str, Any]) -> TransformConfig:
    """Build a ``TransformConfig`` from an already-loaded mapping."""

    if not isinstance(data, dict):
        raise ValueError(f"transform config must be a mapping, got {type(data)!r}")
    unknown = [key for key in data if key not in _SECTIONS]
    if unknown:
        raise ValueError(f"unknown transform config sections: {', '.join(map(str, unknown))}")
    sections = {name: _parse_section(name, data.get(name), cls) for name, cls in _SECTIONS.items()}
    return TransformConfig(**sections)


def load_transform_config(path: FilePath | str) -> TransformConfig:
    """Load a YAML transform config and return the normalised ``TransformConfig``."""

    config_path = FilePath(path)
    if not config_path.exists():
        raise FileNotFoundError(f"transform config not found: {config_path}")
    with config_path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    return parse_transform_config(data)


__all__ = [
    "OffsetConfig",
    "SmoothConfig",
    "SubdivideConfig",
    "TransformConfig",
    "load_transform_config",
    "parse_transform_config",
]
