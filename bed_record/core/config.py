#!/usr/bin/env python3

"""
Configuration for reading BED streams.

Settings can come from JSON or YAML files and from environment variable
overrides. Only BedReader consumes them; single-record parsing has no
configurable behaviour.
"""

import os
import json
import logging
from dataclasses import dataclass, asdict, fields, replace
from typing import Optional, Dict, Any, Tuple

import yaml

from .exceptions import ConfigurationError

ERROR_POLICIES = ('raise', 'skip')


def _parse_bool(value: str) -> bool:
    return value.lower() in ('true', '1', 'yes')


def _parse_prefixes(value: str) -> Tuple[str, ...]:
    return tuple(prefix for prefix in value.split(',') if prefix)


ENV_PREFIX = 'BED_RECORD_'
ENV_CONVERTERS = {
    'comment_prefixes': _parse_prefixes,
    'skip_blank_lines': _parse_bool,
    'on_error': str,
    'max_errors': int,
    'log_progress_every': int,
}


@dataclass
class ReaderConfig:
    """Line handling and error policy for BedReader."""

    # Lines to pass over
    comment_prefixes: Tuple[str, ...] = ('#', 'track', 'browser')
    skip_blank_lines: bool = True

    # Malformed lines: 'raise' stops at the first one, 'skip' logs and continues
    on_error: str = 'raise'
    max_errors: int = 0  # 0 = no limit

    # Progress logging interval in records, 0 = off
    log_progress_every: int = 0

    @classmethod
    def from_file(cls, config_path: str, base: Optional['ReaderConfig'] = None) -> 'ReaderConfig':
        """Load settings from a JSON or YAML file on top of ``base`` (defaults if omitted)."""
        return cls.from_dict(read_config_file(config_path), base=base)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any],
                  base: Optional['ReaderConfig'] = None) -> 'ReaderConfig':
        """Apply the recognised keys of a mapping to ``base`` and validate the result."""
        names = {f.name for f in fields(cls)}
        ignored = sorted(set(config_dict) - names)
        if ignored:
            logging.debug(f"Ignoring unknown reader settings: {', '.join(ignored)}")

        overrides = {key: value for key, value in config_dict.items() if key in names}
        try:
            return replace(base or cls(), **overrides)
        except TypeError as e:
            raise ConfigurationError(f"Invalid reader setting: {e}")

    @classmethod
    def from_env(cls, base: Optional['ReaderConfig'] = None) -> 'ReaderConfig':
        """Apply BED_RECORD_* environment variables on top of ``base``."""
        overrides = {}
        for field_name, converter in ENV_CONVERTERS.items():
            env_var = ENV_PREFIX + field_name.upper()
            raw = os.getenv(env_var)
            if not raw:
                continue
            try:
                overrides[field_name] = converter(raw)
            except ValueError as e:
                raise ConfigurationError(f"Invalid environment variable {env_var}: {e}")
        return cls.from_dict(overrides, base=base)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        config_dict = asdict(self)
        config_dict['comment_prefixes'] = list(self.comment_prefixes)
        return config_dict

    def save_to_file(self, config_path: str) -> None:
        """Save configuration to file."""
        config_dict = self.to_dict()

        try:
            with open(config_path, 'w') as f:
                if config_path.lower().endswith(('.yaml', '.yml')):
                    yaml.safe_dump(config_dict, f, default_flow_style=False)
                else:
                    json.dump(config_dict, f, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Error saving configuration: {e}")

    def validate(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.comment_prefixes, str):
            raise ConfigurationError("comment_prefixes must be a sequence of strings")
        self.comment_prefixes = tuple(self.comment_prefixes)
        if not all(isinstance(prefix, str) and prefix for prefix in self.comment_prefixes):
            raise ConfigurationError("comment_prefixes must be non-empty strings")

        if self.on_error not in ERROR_POLICIES:
            raise ConfigurationError(f"on_error must be one of {', '.join(ERROR_POLICIES)}")

        if self.max_errors < 0:
            raise ConfigurationError("max_errors must be >= 0")

        if self.log_progress_every < 0:
            raise ConfigurationError("log_progress_every must be >= 0")

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.validate()


def read_config_file(config_path: str) -> Dict[str, Any]:
    """Return the settings mapping stored in a JSON or YAML file."""
    if not os.path.exists(config_path):
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    is_yaml = config_path.lower().endswith(('.yaml', '.yml'))
    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) if is_yaml else json.load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Invalid configuration file format: {e}")
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration: {e}")

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration file must hold a mapping: {config_path}")
    return config_data


def load_config(config_path: Optional[str] = None,
                use_env: bool = True) -> ReaderConfig:
    """
    Build a reader configuration, layering sources key by key.

    Defaults come first, then BED_RECORD_* environment variables (when
    ``use_env``), then whatever keys the file at ``config_path`` sets. A key
    the file leaves out keeps its environment or default value.
    """
    config = ReaderConfig.from_env() if use_env else ReaderConfig()
    if config_path:
        config = ReaderConfig.from_file(config_path, base=config)
    return config
