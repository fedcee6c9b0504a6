# jsonrpc_core/services/response_builder.py

"""JSON-RPC Response Builder

Turns a handler outcome and the request id into a Response.
"""

from typing import Any, Dict, Optional
import logging

from jsonrpc_core.core.config import settings
from jsonrpc_core.models.jsonrpc import Err, ErrorObject, Ok, Outcome, Response

logger = logging.getLogger(__name__)


def result_to_response(outcome: Outcome, id: Any) -> Response:
    """
    Convert a handler outcome into a response

    Args:
        outcome: Ok(result) or Err(error)
        id: Request id, echoed back unchanged

    Returns:
        Response with result set for Ok and error set for Err

    Raises:
        TypeError: If outcome is neither Ok nor Err
    """
    if isinstance(outcome, Ok):
        logger.debug(f"Success response for id={id!r}", extra={"rpc": {"id": id}})
        return Response(id=id, result=outcome.value)
    if isinstance(outcome, Err):
        logger.debug(
            f"Error response for id={id!r}: {outcome.error.code}",
            extra={"rpc": {"id": id, "code": outcome.error.code}}
        )
        return Response(id=id, error=outcome.error)
    raise TypeError(f"Expected Ok or Err, got {type(outcome).__name__}")


def success_response(id: Any, result: Any) -> Response:
    return result_to_response(Ok(result), id)


def error_response(id: Any, error: ErrorObject) -> Response:
    return result_to_response(Err(error), id)


def to_wire(response: Response, version: Optional[str] = None) -> Dict[str, Any]:
    """Serialize using the configured JSONRPC_VERSION unless one is given"""
    return response.to_wire(version or settings.JSONRPC_VERSION)
