"""Error types shared across the gateway."""

from typing import Optional


class GatewayError(Exception):
    """Base error for all gateway failures."""


class ConfigurationError(GatewayError):
    """Required configuration is missing or malformed."""


class UpstreamError(GatewayError):
    """EasyBusy answered with a non-2xx status."""

    def __init__(self, method: str, path: str, status_code: int, body: str):
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
        super().__init__(f"EasyBusy {method} {path} failed ({status_code}): {body}")


class UnknownToolError(GatewayError):
    def __init__(self, name: Optional[str]):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolArgumentError(GatewayError):
    """Tool arguments do not satisfy the tool's declared input shape."""

    def __init__(self, name: str, detail: str):
        self.name = name
        self.detail = detail
        super().__init__(f"Invalid arguments for {name}: {detail}")
