"""Error codes, the Result type and upstream error normalisation."""

from .decode import ErrorInfo, decode_error_message, parse_body, process_error
from .errors import AuthError, ErrorCode, classify_exception
from .result import Err, Ok, Result

__all__ = [
    "AuthError",
    "Err",
    "ErrorCode",
    "ErrorInfo",
    "Ok",
    "Result",
    "classify_exception",
    "decode_error_message",
    "parse_body",
    "process_error",
]
