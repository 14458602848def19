"""Core types: results, exit codes, configuration."""

from .config import ConfigError, TaggerConfig, default_summary_path, load_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "TaggerConfig",
    "default_summary_path",
    "load_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
