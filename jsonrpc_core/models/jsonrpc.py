# jsonrpc_core/models/jsonrpc.py

"""JSON-RPC Error and Response Models

Pydantic models for the error object, the response envelope and the
Ok/Err outcome a method handler produces. All models are frozen: they are
built once and handed to the transport layer for serialization.
"""

from typing import Any, Dict, Optional, Union
from enum import Enum
from pydantic import BaseModel, ConfigDict, model_validator

from jsonrpc_core.core.exceptions import ResponseShapeError, UnsupportedVersionError


# Standard JSON-RPC Error Codes
class JSONRPCErrorCode:
    """JSON-RPC 2.0 Standard Error Codes"""
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    # Whole range reserved by the protocol
    RESERVED_MIN = -32768
    RESERVED_MAX = -32000

    # Server errors -32000 to -32099, implementation defined
    SERVER_ERROR_MIN = -32099
    SERVER_ERROR_MAX = -32000


class ErrorKind(str, Enum):
    """Protocol-level error conditions with a fixed code and message"""
    PARSE_ERROR = "parse_error"
    INVALID_REQUEST = "invalid_request"
    METHOD_NOT_FOUND = "method_not_found"
    INVALID_PARAMS = "invalid_params"
    INTERNAL_ERROR = "internal_error"

    @property
    def code(self) -> int:
        return _ERROR_TABLE[self][0]

    @property
    def message(self) -> str:
        return _ERROR_TABLE[self][1]

    @classmethod
    def from_code(cls, code: int) -> Optional["ErrorKind"]:
        """Look up the kind for a reserved code, None for any other code"""
        for kind, (kind_code, _) in _ERROR_TABLE.items():
            if kind_code == code:
                return kind
        return None


# http://www.jsonrpc.org/specification#error_object
_ERROR_TABLE: Dict[ErrorKind, tuple] = {
    ErrorKind.PARSE_ERROR: (JSONRPCErrorCode.PARSE_ERROR, "Parse error"),
    ErrorKind.INVALID_REQUEST: (JSONRPCErrorCode.INVALID_REQUEST, "Invalid Request"),
    ErrorKind.METHOD_NOT_FOUND: (JSONRPCErrorCode.METHOD_NOT_FOUND, "Method not found"),
    ErrorKind.INVALID_PARAMS: (JSONRPCErrorCode.INVALID_PARAMS, "Invalid params"),
    ErrorKind.INTERNAL_ERROR: (JSONRPCErrorCode.INTERNAL_ERROR, "Internal error"),
}


class ErrorObject(BaseModel):
    """JSON-RPC Error Object"""
    model_config = ConfigDict(frozen=True)

    code: int
    message: str
    data: Optional[Any] = None  # None means the member is omitted

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the JSON-RPC error member"""
        # Only the data member is dropped when absent; None values nested
        # inside data are part of the payload
        exclude = {"data"} if self.data is None else None
        return self.model_dump(mode="json", exclude=exclude)


class Response(BaseModel):
    """JSON-RPC Response carrying exactly one of result or error

    A successful call may legitimately return ``null``, so success is
    decided by whether ``result`` was supplied, not by its value.
    """
    model_config = ConfigDict(frozen=True)

    id: Any
    result: Any = None
    error: Optional[ErrorObject] = None

    @model_validator(mode="after")
    def check_exclusive(self) -> "Response":
        has_result = "result" in self.model_fields_set
        has_error = self.error is not None
        if has_result == has_error:
            state = "both" if has_result else "neither"
            raise ResponseShapeError(
                f"Response must carry exactly one of result or error, got {state}",
                details={"id": self.id}
            )
        return self

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_wire(self, version: Optional[str] = None) -> Dict[str, Any]:
        """
        Serialize to a JSON-compatible dict

        Args:
            version: None for the bare result/error/id object, "2.0" to add
                the ``jsonrpc`` member, "1.0" to emit both result and error
                with the absent one set to null

        Returns:
            Response dictionary ready for json.dumps

        Raises:
            UnsupportedVersionError: If version is not None, "1.0" or "2.0"
        """
        if version not in (None, "1.0", "2.0"):
            raise UnsupportedVersionError(
                f"Unsupported JSON-RPC version: {version}",
                details={"version": version}
            )

        # exclude_none here would also drop a null result or id
        dumped = self.model_dump(mode="json", exclude={"error"})

        wire: Dict[str, Any] = {}
        if version == "2.0":
            wire["jsonrpc"] = "2.0"

        if version == "1.0":
            wire["result"] = dumped["result"] if self.is_success else None
            wire["error"] = self.error.to_wire() if self.is_error else None
        elif self.is_error:
            wire["error"] = self.error.to_wire()
        else:
            wire["result"] = dumped["result"]

        wire["id"] = dumped["id"]
        return wire


class Ok(BaseModel):
    """Successful handler outcome"""
    model_config = ConfigDict(frozen=True)

    value: Any = None

    def __init__(self, value: Any = None, **data: Any):
        super().__init__(value=value, **data)


class Err(BaseModel):
    """Failed handler outcome"""
    model_config = ConfigDict(frozen=True)

    error: ErrorObject

    def __init__(self, error: ErrorObject, **data: Any):
        super().__init__(error=error, **data)


Outcome = Union[Ok, Err]
