# jsonrpc_core/services/errors.py

"""JSON-RPC Error Catalog

Builds ErrorObjects for the reserved protocol errors, the
implementation-defined server error range and application errors.
"""

from typing import Any, Optional
import logging

from jsonrpc_core.core.config import settings
from jsonrpc_core.core.exceptions import InvalidErrorCodeError
from jsonrpc_core.models.jsonrpc import ErrorKind, ErrorObject, JSONRPCErrorCode

logger = logging.getLogger(__name__)


def standard_error(kind: ErrorKind, data: Optional[Any] = None) -> ErrorObject:
    """
    Create the canonical error for a reserved JSON-RPC condition

    Args:
        kind: One of the ErrorKind members
        data: Optional diagnostic payload, attached verbatim

    Returns:
        ErrorObject with the fixed code/message for ``kind``

    Example:
        >>> standard_error(ErrorKind.PARSE_ERROR).code
        -32700
    """
    error = ErrorObject(code=kind.code, message=kind.message, data=data)
    logger.debug(f"Built standard error {kind.name} ({kind.code})")
    return error


def is_reserved_code(code: int) -> bool:
    """True if ``code`` lies in the range the protocol reserves for itself"""
    return JSONRPCErrorCode.RESERVED_MIN <= code <= JSONRPCErrorCode.RESERVED_MAX


def server_error(code: int, message: str, data: Optional[Any] = None) -> ErrorObject:
    """
    Create an implementation-defined server error

    Args:
        code: Error code between -32099 and -32000
        message: Short description of the failure
        data: Optional diagnostic payload

    Raises:
        InvalidErrorCodeError: If code is outside the server error range
    """
    if not JSONRPCErrorCode.SERVER_ERROR_MIN <= code <= JSONRPCErrorCode.SERVER_ERROR_MAX:
        raise InvalidErrorCodeError(
            code,
            f"server errors use {JSONRPCErrorCode.SERVER_ERROR_MIN}..{JSONRPCErrorCode.SERVER_ERROR_MAX}"
        )
    return ErrorObject(code=code, message=message, data=data)


def application_error(code: int, message: str, data: Optional[Any] = None) -> ErrorObject:
    """
    Create an application-defined error

    With VALIDATE_ERROR_CODES enabled, codes inside the reserved range are
    rejected; disable it to pass any integer through unchecked.

    Args:
        code: Application error code
        message: Short description of the failure
        data: Optional diagnostic payload

    Raises:
        InvalidErrorCodeError: If validation is enabled and code is reserved
    """
    if settings.VALIDATE_ERROR_CODES and is_reserved_code(code):
        raise InvalidErrorCodeError(
            code,
            f"{JSONRPCErrorCode.RESERVED_MIN}..{JSONRPCErrorCode.RESERVED_MAX} is reserved for the protocol"
        )
    return ErrorObject(code=code, message=message, data=data)
