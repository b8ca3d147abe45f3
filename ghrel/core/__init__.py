"""Core domain types and logic."""

from .config import ConfigError, ReleaseConfig, build_release_config, load_settings
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "ReleaseConfig",
    "build_release_config",
    "load_settings",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
