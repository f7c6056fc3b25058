from prometheus_client import Counter, Histogram

# Prometheus metrics
TOOL_CALLS = Counter("mcp_tool_calls_total", "Tool invocations", ["tool", "outcome"])

RPC_MESSAGES = Counter("mcp_rpc_messages_total", "Inbound JSON-RPC messages", ["method"])

UPSTREAM_LATENCY = Histogram(
    "easybusy_upstream_duration_seconds", "EasyBusy request latency in seconds", ["method"]
)
