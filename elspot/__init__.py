#!filepath: elspot/__init__.py

from .utils.logger import Logging, logs
from .utils.retry import Retry
from .utils.errors import MalformedReading, UnsupportedYear, UserInputError

from .tz import DstResolver, EURule, ZoneInfoRule, fix_dst, load_zone_rule

__version__ = "0.1.0"

# alias
retry = Retry

__all__ = [
    "logs", "Logging",
    "retry",
    "MalformedReading", "UnsupportedYear", "UserInputError",
    "DstResolver", "EURule", "ZoneInfoRule", "fix_dst", "load_zone_rule",
]
