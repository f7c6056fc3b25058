import logging
from typing import Any, Mapping, Optional, cast

from pydantic import ValidationError

from src.adapters.easybusy import EasyBusyClient, UpstreamCall
from src.errors import ToolArgumentError, UnknownToolError
from src.metrics import TOOL_CALLS
from src.tools.registry import (
    PARAMS,
    AvailableSlotsParams,
    BookableServicesParams,
    RequestSlotParams,
    ToolName,
    ToolParams,
)

logger = logging.getLogger(__name__)


def resolve_tool(name: Any) -> ToolName:
    try:
        return ToolName(name)
    except (TypeError, ValueError):
        raise UnknownToolError(name) from None


def parse_arguments(tool: ToolName, arguments: Optional[Mapping[str, Any]]) -> ToolParams:
    try:
        return PARAMS[tool].model_validate(dict(arguments or {}))
    except (TypeError, ValueError, ValidationError) as e:
        raise ToolArgumentError(tool.value, str(e)) from e


def _upstream_call(tool: ToolName, params: ToolParams) -> UpstreamCall:
    if tool is ToolName.COMPANY_FEATURES:
        return UpstreamCall("/v2/company/features")

    if tool is ToolName.COMPANY_LANGUAGES:
        return UpstreamCall("/v2/company/languages")

    if tool is ToolName.BOOKABLE_SERVICES:
        # parse_arguments validated against PARAMS[tool]
        services = cast(BookableServicesParams, params)
        return UpstreamCall(
            "/v2/simple-booking/bookable-services",
            query={"languageCode": services.language_code},
        )

    if tool is ToolName.BOOKABLE_DOCTORS:
        return UpstreamCall("/v2/simple-booking/bookable-doctors")

    if tool is ToolName.AVAILABLE_SLOTS:
        slots = cast(AvailableSlotsParams, params)
        return UpstreamCall(
            "/v2/simple-booking/available-slots",
            query={
                "languageCode": slots.language_code,
                "from": slots.from_,
                "to": slots.to,
                "serviceId": slots.service_id,
                "doctorId": slots.doctor_id,
            },
        )

    slot = cast(RequestSlotParams, params)
    return UpstreamCall(
        f"/v2/simple-booking/request-slot/{slot.slot_id}",
        method="POST",
        body={
            "serviceId": slot.service_id,
            "message": slot.message if slot.message is not None else "",
            "patientInfo": slot.patient_info,
        },
    )


def build_call(name: Any, arguments: Optional[Mapping[str, Any]] = None) -> UpstreamCall:
    """Resolve a tool name and its arguments into one upstream request, without I/O."""
    tool = resolve_tool(name)
    return _upstream_call(tool, parse_arguments(tool, arguments))


class ToolDispatcher:
    """Routes ``tools/call`` requests to the EasyBusy client."""

    def __init__(self, client: EasyBusyClient):
        self.client = client

    async def call(self, name: Any, arguments: Optional[Mapping[str, Any]] = None) -> Any:
        try:
            upstream = build_call(name, arguments)
        except UnknownToolError:
            TOOL_CALLS.labels(tool="unknown", outcome="rejected").inc()
            raise
        except ToolArgumentError:
            TOOL_CALLS.labels(tool=str(name), outcome="rejected").inc()
            raise

        logger.info(f"Tool call {name} -> {upstream.method} {upstream.path}")
        try:
            result = await self.client.acall(upstream)
        except Exception:
            TOOL_CALLS.labels(tool=str(name), outcome="error").inc()
            raise
        TOOL_CALLS.labels(tool=str(name), outcome="ok").inc()
        return result
