# jsonrpc_core/services/outcome.py

"""Handler Outcome Capture

Runs a method handler and captures whatever happens as an Ok/Err outcome,
so faults are turned into ErrorObjects before they reach the response
builder. Parameters are checked against the handler signature first:
a call that cannot bind is reported as Invalid params, while a TypeError
raised from inside the handler is an Internal error.

Some builtins expose no signature. For those, a TypeError raised by the
call itself, before any Python frame of the handler runs, is taken as a
bad-argument error and reported as Invalid params.
"""

from typing import Any, Awaitable, Callable, Optional
import inspect
import logging
import traceback

from jsonrpc_core.core.config import settings
from jsonrpc_core.core.exceptions import JSONRPCException
from jsonrpc_core.models.jsonrpc import Err, ErrorKind, ErrorObject, Ok, Outcome
from jsonrpc_core.services.errors import standard_error

logger = logging.getLogger(__name__)


def error_from_exception(exc: BaseException) -> ErrorObject:
    """
    Map an exception to the error object reported to the client

    Args:
        exc: Exception raised while handling a request

    Returns:
        The exception's own error for JSONRPCException, otherwise an
        Internal error describing the exception
    """
    if isinstance(exc, JSONRPCException):
        return exc.to_error()

    data = {
        "error_type": type(exc).__name__,
        "error_message": str(exc)
    }
    if settings.INCLUDE_TRACEBACK_IN_DATA:
        data["traceback"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return standard_error(ErrorKind.INTERNAL_ERROR, data)


def _handler_name(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__name__", repr(handler))


def _signature(handler: Callable[..., Any]) -> Optional[inspect.Signature]:
    try:
        return inspect.signature(handler)
    except (TypeError, ValueError):
        return None


def _bind_error(
    handler: Callable[..., Any],
    signature: Optional[inspect.Signature],
    args: tuple,
    kwargs: dict
) -> Optional[ErrorObject]:
    """Return an Invalid params error if args do not fit the handler signature"""
    if signature is None:
        return None

    try:
        signature.bind(*args, **kwargs)
    except TypeError as e:
        name = _handler_name(handler)
        logger.error(f"Invalid params for {name}: {e}", extra={"rpc": {"handler": name}})
        return standard_error(ErrorKind.INVALID_PARAMS, str(e))
    return None


def _raised_by_call(exc: BaseException) -> bool:
    """True if exc came from the call expression itself, not from handler code"""
    tb = exc.__traceback__
    return tb is not None and tb.tb_next is None


def _failure(handler: Callable[..., Any], exc: Exception, signature_checked: bool) -> Err:
    name = _handler_name(handler)

    if isinstance(exc, JSONRPCException):
        logger.warning(
            f"{name} reported JSON-RPC error {exc.code}: {exc.message}",
            extra={"rpc": {"handler": name, "code": exc.code}}
        )
        return Err(exc.to_error())

    if isinstance(exc, TypeError) and not signature_checked and _raised_by_call(exc):
        logger.error(
            f"Invalid params for {name}: {exc}",
            extra={"rpc": {"handler": name, "code": ErrorKind.INVALID_PARAMS.code}}
        )
        return Err(standard_error(ErrorKind.INVALID_PARAMS, str(exc)))

    logger.error(
        f"Error executing {name}: {exc}",
        extra={"rpc": {"handler": name, "code": ErrorKind.INTERNAL_ERROR.code}}
    )
    logger.debug(traceback.format_exc())
    return Err(error_from_exception(exc))


def capture(handler: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """
    Call a synchronous handler and capture the outcome

    Args:
        handler: Callable implementing the method
        *args: Positional params
        **kwargs: Named params

    Returns:
        Ok(result) on success, Err(error) on failure

    Raises:
        TypeError: If handler is a coroutine function or returns an
            awaitable; those must go through capture_async
    """
    if inspect.iscoroutinefunction(handler):
        raise TypeError(f"{_handler_name(handler)} is a coroutine function, use capture_async")

    signature = _signature(handler)
    bind_error = _bind_error(handler, signature, args, kwargs)
    if bind_error is not None:
        return Err(bind_error)

    try:
        result = handler(*args, **kwargs)
    except Exception as e:
        return _failure(handler, e, signature is not None)

    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        raise TypeError(f"{_handler_name(handler)} returned an awaitable, use capture_async")
    return Ok(result)


async def capture_async(
    handler: Callable[..., Awaitable[Any]],
    *args: Any,
    **kwargs: Any
) -> Outcome:
    """
    Await an async handler and capture the outcome

    Plain callables are accepted too; their return value is used as-is.

    Args:
        handler: Coroutine function implementing the method
        *args: Positional params
        **kwargs: Named params

    Returns:
        Ok(result) on success, Err(error) on failure
    """
    signature = _signature(handler)
    bind_error = _bind_error(handler, signature, args, kwargs)
    if bind_error is not None:
        return Err(bind_error)

    try:
        result = handler(*args, **kwargs)
        if inspect.isawaitable(result):
            result = await result
    except Exception as e:
        return _failure(handler, e, signature is not None)
    return Ok(result)
