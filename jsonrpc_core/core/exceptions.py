# jsonrpc_core/core/exceptions.py

"""Custom exceptions for jsonrpc-core"""


class JSONRPCCoreException(Exception):
    """Base exception for all library errors"""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class JSONRPCException(JSONRPCCoreException):
    """Raised by method handlers to report a JSON-RPC error to the caller

    Converted into an ErrorObject by the outcome capture helpers, so the
    handler decides the code, message and data the client sees.
    """

    def __init__(self, code: int, message: str, data=None):
        self.code = code
        self.data = data
        super().__init__(message, details={"code": code, "data": data})

    @classmethod
    def from_kind(cls, kind, data=None) -> "JSONRPCException":
        """Build the exception for one of the reserved ErrorKind members"""
        return cls(kind.code, kind.message, data)

    def to_error(self):
        """Return the ErrorObject carried by this exception"""
        from jsonrpc_core.models.jsonrpc import ErrorObject

        return ErrorObject(code=self.code, message=self.message, data=self.data)


class ResponseShapeError(JSONRPCCoreException):
    """Raised when a response would carry both or neither of result/error"""
    pass


class InvalidErrorCodeError(JSONRPCCoreException):
    """Raised when an error code lies outside the range its constructor allows"""

    def __init__(self, code: int, allowed: str):
        self.code = code
        super().__init__(
            f"Error code {code} not allowed: {allowed}",
            details={"code": code, "allowed": allowed}
        )


class UnsupportedVersionError(JSONRPCCoreException):
    """Raised when serializing for an unknown JSON-RPC version"""
    pass


class ConfigurationError(JSONRPCCoreException):
    """Exception raised when configuration is invalid or missing"""
    pass
