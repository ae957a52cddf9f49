from typing import Any, Dict, Optional

PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603

class JsonRpcError(Exception):
    def __init__(self, code: int, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def to_dict(self) -> Dict[str, Any]:
        error = {"code": self.code, "message": self.message}
        if self.data:
            error["data"] = self.data
        return error

class ParseError(JsonRpcError):
    def __init__(self, detail: str):
        super().__init__(PARSE_ERROR, "Parse error", {"message": detail})

class MethodNotFoundError(JsonRpcError):
    def __init__(self):
        super().__init__(METHOD_NOT_FOUND, "Method not found")

class InternalError(JsonRpcError):
    def __init__(self, detail: str):
        super().__init__(INTERNAL_ERROR, "Internal error", {"message": detail})

class UnknownToolError(ValueError):
    def __init__(self, name: Any):
        super().__init__(f"Unknown tool: {name}")
        self.name = name

class UpstreamError(Exception):
    """
    A WordPress REST call failed.

    payload is the decoded JSON body of the upstream response, when there was one.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

class UpstreamTimeout(UpstreamError):
    pass
