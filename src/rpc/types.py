from enum import IntEnum
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(IntEnum):
    PARSE_ERROR = -32700
    METHOD_NOT_FOUND = -32601
    SERVER_ERROR = -32000


class Method:
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"


class JsonRpcRequest(BaseModel):
    """Inbound envelope. Unknown members are tolerated, never validated."""

    model_config = ConfigDict(extra="ignore")

    jsonrpc: Any = "2.0"
    id: Any = None
    method: Any = None
    params: Any = None

    @classmethod
    def from_payload(cls, payload: Any) -> "JsonRpcRequest":
        if not isinstance(payload, dict):
            return cls()
        return cls(**{k: payload[k] for k in ("jsonrpc", "id", "method", "params") if k in payload})


class ToolCallParams(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: Any = None
    arguments: Optional[Dict[str, Any]] = None

    @classmethod
    def from_params(cls, params: Any) -> "ToolCallParams":
        if not isinstance(params, dict):
            return cls()
        return cls.model_validate(params)


class JsonRpcError(BaseModel):
    code: int
    message: str


class JsonRpcResult(BaseModel):
    jsonrpc: Literal["2.0"] = "2.0"
    id: Any = None
    result: Any = None


class JsonRpcErrorResponse(BaseModel):
    jsonrpc: Literal["2.0"] = "2.0"
    id: Any = None
    error: JsonRpcError


def result_message(request_id: Any, result: Any) -> Dict[str, Any]:
    return JsonRpcResult(id=request_id, result=result).model_dump()


def error_message(request_id: Any, code: int, message: str) -> Dict[str, Any]:
    return JsonRpcErrorResponse(
        id=request_id, error=JsonRpcError(code=int(code), message=message)
    ).model_dump()
