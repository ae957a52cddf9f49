from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict

JSONRPC_VERSION = "2.0"

class JsonRpcRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    jsonrpc: Any = JSONRPC_VERSION
    method: Any = None
    params: Any = None
    id: Any = None

class ErrorEnvelope(BaseModel):
    code: int
    message: str
    data: Optional[Dict[str, Any]] = None

class JsonRpcResponse(BaseModel):
    jsonrpc: str = JSONRPC_VERSION
    result: Optional[Any] = None
    error: Optional[ErrorEnvelope] = None
    id: Any = None

    def to_wire(self) -> Dict[str, Any]:
        """Wire form: id always present, exactly one of result/error."""
        payload: Dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result
        return payload

class ToolInputSchema(BaseModel):
    type: str = "object"
    properties: Dict[str, Any] = {}
    required: Optional[List[str]] = None

class ToolDefinition(BaseModel):
    name: str
    description: Optional[str] = None
    inputSchema: ToolInputSchema

class ToolListResult(BaseModel):
    tools: List[ToolDefinition]
