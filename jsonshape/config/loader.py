import logging
import os
import re
from dataclasses import dataclass, field
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from jsonshape.core.exceptions import ConfigError
from jsonshape.models.options import RenderOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "jsonshape.yml"

_ENV_VAR = re.compile(r'\$\{([^}]+)\}')


def _expand_env_vars(options: dict) -> dict:
    """Replace ${VAR} in string option values; unset variables become empty."""
    return {
        key: _ENV_VAR.sub(lambda m: os.environ.get(m.group(1), ""), value) if isinstance(value, str) else value
        for key, value in options.items()
    }


@dataclass
class Config:
    """Main configuration object."""
    render: RenderOptions = field(default_factory=RenderOptions)
    path: Optional[str] = None  # File the config was read from, if any

    def with_overrides(self, **overrides: Any) -> RenderOptions:
        """Return render options with non-None overrides applied.

        Raises:
            ConfigError: If an override is not a valid option value
        """
        values = self.render.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return _build_options(values, source="command line")


def _build_options(values: dict, source: str) -> RenderOptions:
    try:
        return RenderOptions(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'render'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid render options in {source}: {problems}") from e


def load_config(path: Optional[str] = None) -> Config:
    """Loads configuration from a YAML file.

    Without an explicit path, ``jsonshape.yml`` in the working directory is
    used when present; otherwise defaults apply.

    Args:
        path: Path to the config file

    Returns:
        Parsed Config object

    Raises:
        ConfigError: If an explicit config file is missing, the YAML is
            invalid, or the render options are invalid
    """
    if path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return Config()
        path = DEFAULT_CONFIG_PATH

    if not os.path.exists(path):
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML in {path}:\n{e}"
        ) from e

    logger.debug(f"Loaded configuration from {path}")

    if data is None:
        return Config(path=path)

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping.")

    unknown = set(data) - {"render"}
    if unknown:
        raise ConfigError(
            f"Unknown section(s) in {path}: {', '.join(sorted(unknown))}\n"
            "Only 'render' is supported."
        )

    render_data = data.get("render") or {}
    if not isinstance(render_data, dict):
        raise ConfigError(
            f"'render' in {path} must be a mapping.\n"
            "Example:\n\n"
            "render:\n"
            "  indent: 4\n"
            "  sort_keys: true"
        )

    render_data = _expand_env_vars(render_data)

    return Config(render=_build_options(render_data, source=path), path=path)
