"""
Configuration for featuretree.

Handles TOML file parsing for index build options.
"""

import tomllib
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

from .debug import debug_print


@dataclass
class IndexConfig:
    """Build options for IntervalTree and FeatureIndex."""
    parallel_depth: int = 0  # Levels of the tree built with fork/join (0 = serial)
    verify: bool = False     # Run verify_integrity() after every build
    debug: bool = False      # Print build diagnostics to stderr

    def __post_init__(self):
        if not isinstance(self.parallel_depth, int) or self.parallel_depth < 0:
            raise ValueError(f"parallel_depth must be a non-negative integer, got {self.parallel_depth!r}")

    @property
    def max_workers(self) -> int:
        """Worker count that lets every forked subtree run without waiting for a free thread."""
        return 2 ** self.parallel_depth - 1


@dataclass
class Config:
    """Main configuration container for featuretree."""

    index: IndexConfig = field(default_factory=IndexConfig)

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'featuretree' / 'featuretree.toml'

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        """Build a Config from already parsed TOML data."""
        index_data = data.get('Index', {})
        index = IndexConfig(
            parallel_depth=index_data.get('parallel_depth', IndexConfig.parallel_depth),
            verify=index_data.get('verify', IndexConfig.verify),
            debug=index_data.get('debug', IndexConfig.debug),
        )
        debug_print(
            "CONFIG",
            f"Index: parallel_depth={index.parallel_depth} verify={index.verify}",
            enabled=index.debug
        )
        return cls(index=index)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """Load configuration from TOML file."""
        if config_path is None:
            config_path = cls.get_default_config_path()

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)

        debug_print("CONFIG", f"Loaded configuration from {config_path}, sections: {list(data.keys())}")
        return cls.from_dict(data)
