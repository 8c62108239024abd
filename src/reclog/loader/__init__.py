"""reclog loader - line scanning, grammar parsing, and error reporting."""

from reclog.loader.errors import ErrorFormatter
from reclog.loader.parser import OperationParser, ParseState
from reclog.loader.scanner import LineScanner

__all__ = [
    "ErrorFormatter",
    "LineScanner",
    "OperationParser",
    "ParseState",
]
