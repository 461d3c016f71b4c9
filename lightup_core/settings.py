from __future__ import annotations

import os

from .completion import THRESHOLD_MODE, check_mode

_TRUTHY = ('1', 'true', 'yes', 'on')


def env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def debug_enabled() -> bool:
    """Set LIGHTUP_DEBUG=1 to print session and API traces."""
    return env_flag('LIGHTUP_DEBUG')


def debug(tag: str, message: str) -> None:
    if debug_enabled():
        print(f"[{tag}] {message}")


def default_quantize() -> bool:
    return env_flag('LIGHTUP_QUANTIZE')


def default_mode() -> str:
    return check_mode(os.getenv('LIGHTUP_MODE', THRESHOLD_MODE).lower())
