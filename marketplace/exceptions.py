"""
Marketplace exception taxonomy.

Services raise these for expected failures; the RPC view and the DRF exception
handler map them onto HTTP status codes and JSON-RPC error objects. Storage
errors (IntegrityError, OperationalError) are not wrapped and reach the caller
unchanged.
"""

from typing import Any, Dict, List, Optional


class MarketplaceException(Exception):
    """Base class for marketplace service exceptions."""

    status_code = 400
    rpc_code = -32000

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.rpc_code, "message": self.message}

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((type(self), self.message))


class ValidationException(MarketplaceException):
    """Raised when a request body does not satisfy its required shape."""

    rpc_code = -32602

    def __init__(self, message: str, details: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.details = list(details or [])

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.rpc_code, "message": self.message, "data": self.details}


class NotFoundException(MarketplaceException):
    """Raised when no row matches the requested identifier."""

    status_code = 404
    rpc_code = -32001

    def __init__(self, id: Any, message: Optional[str] = None):
        super().__init__(message or f"Entity with identifier {id} does not exist")
        self.id = id

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.rpc_code, "message": self.message, "data": {"id": self.id}}


class MethodNotFoundException(NotFoundException):
    """Raised by the RPC registry for unknown method names."""

    rpc_code = -32601

    def __init__(self, method: str):
        super().__init__(method, f"Method {method} not found")


class MessageException(MarketplaceException):
    """Raised when a request is well-formed but breaks a business rule."""
