"""
Configuration schema for the giftwrap CLI.

A run file carries the input points plus optional stepping and logging
settings. The hull engine itself reads no configuration; only the CLI
does.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
import yaml


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logging configuration."""

    level: str = "WARNING"

    def __post_init__(self):
        """Validate logging configuration."""
        if self.level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.level}. "
                f"Must be one of {VALID_LOG_LEVELS}"
            )

    @property
    def level_value(self) -> int:
        """Numeric level for the logging module."""
        return getattr(logging, self.level)


@dataclass(frozen=True)
class RunConfig:
    """
    Hull run configuration.

    Loaded from YAML and validated at construction.
    Immutable after construction (frozen dataclass).
    """

    points: List[Tuple[float, float]] = field(default_factory=list)
    max_steps: Optional[int] = None
    logging_config: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Validate run configuration."""
        for point in self.points:
            if len(point) != 2:
                raise ValueError(
                    f"Each point must be an [x, y] pair, got {list(point)}"
                )

        if self.max_steps is not None and self.max_steps < 1:
            raise ValueError(
                f"max_steps must be a positive integer, got {self.max_steps}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "RunConfig":
        """
        Build from a parsed YAML mapping.

        Raises:
            ValueError: If the mapping is malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f"Run config must be a mapping, got {type(data).__name__}")

        raw_points = data.get("points", [])
        if not isinstance(raw_points, list):
            raise ValueError("'points' must be a list of [x, y] pairs")

        try:
            points = [
                (float(point[0]), float(point[1])) if len(point) == 2 else tuple(point)
                for point in raw_points
            ]
        except (TypeError, ValueError, KeyError, IndexError) as e:
            raise ValueError(f"Invalid point data: {e!r}")

        logging_data = data.get("logging") or {}
        if not isinstance(logging_data, dict):
            raise ValueError("'logging' must be a mapping with a 'level' key")
        logging_config = LoggingConfig(
            level=str(logging_data.get("level", "WARNING")).upper()
        )

        max_steps = data.get("max_steps")
        if max_steps is not None:
            try:
                max_steps = int(max_steps)
            except (TypeError, ValueError):
                raise ValueError(f"max_steps must be an integer, got {max_steps!r}")

        return cls(
            points=points,
            max_steps=max_steps,
            logging_config=logging_config,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "RunConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            points:
              - [0, 0]
              - [4, 0]
              - [4, 4]
              - [0, 4]
              - [2, 2]

            max_steps: 50          # optional, step mode only

            logging:
              level: INFO

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML is invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        return cls.from_dict(data or {})
