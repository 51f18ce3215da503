# Copyright (c) 2024, NCC Group plc
# Released as open source under GPLv3

import logging
import pathlib
import yaml

from .constants import (DEFAULT_COLUMN_COUNT, DEFAULT_COLUMN_WIDTH, DEFAULT_COLUMN_GROUP,
                        DEFAULT_PADDING, DEFAULT_DELIMITER)
from .errors import ConfigError

logger = logging.getLogger(__name__)


class DumpConfig:
    """
    Rendering options of a Dumper, resolved once at construction.

    width:   bytes per column (default 8)
    columns: columns per line (default 2)
    group:   bytes per group inside a column (default 1, at most width)
    bits:    render bytes as 8 binary digits instead of 2 hex digits
    padding: text between columns of the body (default 3 spaces)
    delim:   text around the body and the ASCII field (default "|")
    verbose: never elide repeated lines

    Non-positive width, columns or group fall back to their defaults, and a
    group larger than width is clamped down to width. Neither is an error.
    """
    FIELDS = ("width", "columns", "group", "bits", "padding", "delim", "verbose")

    def __init__(self, width=DEFAULT_COLUMN_WIDTH, columns=DEFAULT_COLUMN_COUNT,
                 group=DEFAULT_COLUMN_GROUP, bits=False, padding=DEFAULT_PADDING,
                 delim=DEFAULT_DELIMITER, verbose=False):
        # options as given, so replace() re-resolves clamps from them
        self._given = dict(width=width, columns=columns, group=group, bits=bits,
                           padding=padding, delim=delim, verbose=verbose)
        self._width = _positive("width", width, DEFAULT_COLUMN_WIDTH)
        self._columns = _positive("columns", columns, DEFAULT_COLUMN_COUNT)
        group = _positive("group", group, DEFAULT_COLUMN_GROUP)
        if group > self._width:
            logger.debug("Clamping group %d to column width %d", group, self._width)
            group = self._width
        self._group = group
        self._bits = bool(bits)
        self._padding = _text("padding", padding, DEFAULT_PADDING)
        self._delim = _text("delim", delim, DEFAULT_DELIMITER)
        self._verbose = bool(verbose)

    width = property(lambda self: self._width)
    columns = property(lambda self: self._columns)
    group = property(lambda self: self._group)
    bits = property(lambda self: self._bits)
    padding = property(lambda self: self._padding)
    delim = property(lambda self: self._delim)
    verbose = property(lambda self: self._verbose)

    @property
    def block_size(self) -> int:
        return self._columns * self._width

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.FIELDS}

    def replace(self, **changes):
        """Returns a copy with the given options overridden (None values are ignored)."""
        opts = dict(self._given)
        for name, value in changes.items():
            if name not in self.FIELDS:
                raise ConfigError(f"Unknown dumper option: {name}")
            if value is not None:
                opts[name] = value
        return DumpConfig(**opts)

    @classmethod
    def from_dict(cls, mapping):
        unknown = set(mapping) - set(cls.FIELDS)
        if unknown:
            raise ConfigError(f"Unknown dumper option(s): {', '.join(sorted(unknown))}")
        return cls(**mapping)

    def save(self, save_config_path: pathlib.Path):
        """saves the resolved options to save_config_path"""
        with open(save_config_path, 'w') as outfile:
            try:
                yaml.dump(self.as_dict(), outfile, default_flow_style=False)
                logger.info(f"Config saved to <{str(save_config_path)}>")
            except yaml.YAMLError as exception:
                logger.error(f"Error while writing config to {str(save_config_path)}", exc_info=True)
                raise ConfigError(str(exception)) from exception

    def __eq__(self, other):
        if not isinstance(other, DumpConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        opts = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"DumpConfig({opts})"


def _positive(name, value, default):
    if value is None:
        return default
    try:
        value = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        logger.debug("Non-positive %s %d, using default %d", name, value, default)
        return default
    return value


def _text(name, value, default):
    if value is None:
        return default
    value = str(value)
    try:
        value.encode('utf-8')
    except UnicodeEncodeError as exception:
        raise ConfigError(f"{name} is not valid text: {value!r}") from exception
    return value


def load_options(config_path: pathlib.Path) -> dict:
    """Reads the raw dumper options of a YAML mapping. An empty file gives no options."""
    config_path = pathlib.Path(config_path)
    try:
        with open(config_path, 'r') as stream:
            config_dictionary = yaml.safe_load(stream=stream)
    except OSError as exception:
        logger.error(f"Cannot open config file: {config_path}")
        raise ConfigError(f"Cannot open config file {config_path}: {exception.strerror}") from exception
    except yaml.YAMLError as exception:
        logger.error("Error while loading config.", exc_info=True)
        raise ConfigError(f"Invalid config file {config_path}: {exception}") from exception

    if config_dictionary is None:
        config_dictionary = {}
    if not isinstance(config_dictionary, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping of options")
    unknown = set(config_dictionary) - set(DumpConfig.FIELDS)
    if unknown:
        raise ConfigError(f"Unknown dumper option(s): {', '.join(sorted(map(str, unknown)))}")
    logger.info(f"Loaded dumper config from {config_path}: {config_dictionary}")
    return config_dictionary


def load_config(config_path: pathlib.Path) -> DumpConfig:
    """Loads dumper options from a YAML mapping. An empty file gives the defaults."""
    return DumpConfig.from_dict(load_options(config_path))
