"""Configuration for ring buffers (env / .env / YAML)."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import find_dotenv, load_dotenv

from circbuf.core.buffer import BOUNDS_CAPACITY, BOUNDS_POLICIES, RingBuffer
from circbuf.core.errors import InvalidArgument
from circbuf.core.log import get as get_logger

log = get_logger(__name__)


@dataclass
class BufferConfig:
    """Settings used to build a :class:`RingBuffer`."""

    capacity: int = 256
    bounds: str = BOUNDS_CAPACITY
    name: str = "ring"

    @classmethod
    def from_env(cls) -> BufferConfig:
        """Load configuration from environment variables (and .env if present)."""
        load_dotenv(find_dotenv(usecwd=True))
        raw_capacity = os.getenv("CIRCBUF_CAPACITY", str(cls.capacity))
        try:
            capacity = int(raw_capacity)
        except ValueError as e:
            raise InvalidArgument(f"CIRCBUF_CAPACITY must be an integer, got {raw_capacity!r}") from e

        return cls(
            capacity=capacity,
            bounds=os.getenv("CIRCBUF_BOUNDS", BOUNDS_CAPACITY).lower(),
            name=os.getenv("CIRCBUF_NAME", "ring"),
        )

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> BufferConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise InvalidArgument(f"unknown buffer config keys: {unknown}")
        return cls(**d)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> BufferConfig:
        """Read a YAML file; accepts a top-level `buffer:` mapping or a flat one."""
        data = yaml.safe_load(Path(yaml_path).read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise InvalidArgument(f"{yaml_path}: expected a mapping at top level")
        section = data.get("buffer", data) or {}
        if not isinstance(section, dict):
            raise InvalidArgument(f"{yaml_path}: 'buffer' must be a mapping")
        return cls.from_dict(section)

    def validate(self) -> None:
        """Validate configuration."""
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise InvalidArgument(f"capacity must be an int, got {self.capacity!r}")
        if self.capacity < 2:
            raise InvalidArgument(f"capacity must be at least 2, got {self.capacity}")
        if self.bounds not in BOUNDS_POLICIES:
            raise InvalidArgument(f"bounds must be one of {BOUNDS_POLICIES}, got {self.bounds!r}")
        if not self.name:
            raise InvalidArgument("name must be non-empty")

    def build(self) -> RingBuffer[Any]:
        self.validate()
        log.debug("building ring name=%s capacity=%d bounds=%s", self.name, self.capacity, self.bounds)
        return RingBuffer(self.capacity, bounds=self.bounds, name=self.name)
