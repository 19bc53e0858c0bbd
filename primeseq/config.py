"""
Run configuration.

Responsibility: read config/default.yaml (or a user file) and validate it.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import InvalidArgumentError
from .sampler import DEFAULT_BOUND

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'config' / 'default.yaml'

DEFAULTS: Dict[str, Any] = {
    'default_bound': DEFAULT_BOUND,
    'seed': None,
    'verify_limit': 20_000,
}


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check keys and value types.

    Parameters
    ----------
    config : dict
        Merged configuration.

    Returns
    -------
    dict
        The same mapping, if valid.
    """
    unknown = sorted(set(config) - set(DEFAULTS))
    if unknown:
        raise InvalidArgumentError(f"unknown config keys: {', '.join(unknown)}")

    for key in ('default_bound', 'verify_limit'):
        value = config[key]
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidArgumentError(f"{key} must be an integer, got {value!r}")

    if config['default_bound'] <= 2:
        raise InvalidArgumentError("default_bound must be > 2 (no primes below it otherwise)")
    if config['verify_limit'] < 2:
        raise InvalidArgumentError("verify_limit must be >= 2")

    seed = config['seed']
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
        raise InvalidArgumentError(f"seed must be an integer or null, got {seed!r}")
    if seed is not None and seed < 0:
        raise InvalidArgumentError(f"seed must be >= 0, got {seed}")

    return config


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load YAML config and merge it over DEFAULTS.

    With no path, config/default.yaml is used if present. An explicit
    path that does not exist raises FileNotFoundError.
    """
    config = dict(DEFAULTS)

    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return config

    with open(path) as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise InvalidArgumentError(f"{path}: top level must be a mapping")

    config.update(loaded)
    return validate_config(config)
