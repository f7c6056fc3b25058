"""
Static EasyBusy tool catalogue.

Descriptors are advertised verbatim on ``tools/list``. The parameter
models below enforce the same required fields on ``tools/call``.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field


class ToolName(str, Enum):
    COMPANY_FEATURES = "easybusy_company_features"
    COMPANY_LANGUAGES = "easybusy_company_languages"
    BOOKABLE_SERVICES = "easybusy_bookable_services"
    BOOKABLE_DOCTORS = "easybusy_bookable_doctors"
    AVAILABLE_SLOTS = "easybusy_available_slots"
    REQUEST_SLOT = "easybusy_request_slot"


class ToolDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias="inputSchema")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def _schema(properties: Dict[str, str], required: Optional[List[str]] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {
        "type": "object",
        "properties": {name: {"type": kind} for name, kind in properties.items()},
    }
    if required:
        schema["required"] = list(required)
    return schema


# --- Parameter structs ---
class ToolParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class NoParams(ToolParams):
    pass


class BookableServicesParams(ToolParams):
    language_code: str = Field(alias="languageCode")


class AvailableSlotsParams(ToolParams):
    language_code: str = Field(alias="languageCode")
    from_: str = Field(alias="from")
    to: str
    service_id: int = Field(alias="serviceId")
    doctor_id: int = Field(alias="doctorId")


class RequestSlotParams(ToolParams):
    slot_id: int = Field(alias="slotId")
    service_id: int = Field(alias="serviceId")
    message: Optional[str] = None
    patient_info: Dict[str, Any] = Field(alias="patientInfo")


TOOLS: Tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name=ToolName.COMPANY_FEATURES.value,
        description="GET /v2/company/features",
        inputSchema=_schema({}),
    ),
    ToolDescriptor(
        name=ToolName.COMPANY_LANGUAGES.value,
        description="GET /v2/company/languages",
        inputSchema=_schema({}),
    ),
    ToolDescriptor(
        name=ToolName.BOOKABLE_SERVICES.value,
        description="GET /v2/simple-booking/bookable-services",
        inputSchema=_schema({"languageCode": "string"}, ["languageCode"]),
    ),
    ToolDescriptor(
        name=ToolName.BOOKABLE_DOCTORS.value,
        description="GET /v2/simple-booking/bookable-doctors",
        inputSchema=_schema({}),
    ),
    ToolDescriptor(
        name=ToolName.AVAILABLE_SLOTS.value,
        description="GET /v2/simple-booking/available-slots",
        inputSchema=_schema(
            {
                "languageCode": "string",
                "from": "string",
                "to": "string",
                "serviceId": "integer",
                "doctorId": "integer",
            },
            ["languageCode", "from", "to", "serviceId", "doctorId"],
        ),
    ),
    ToolDescriptor(
        name=ToolName.REQUEST_SLOT.value,
        description="POST /v2/simple-booking/request-slot/{slotId}",
        inputSchema=_schema(
            {
                "slotId": "integer",
                "serviceId": "integer",
                "message": "string",
                "patientInfo": "object",
            },
            ["slotId", "serviceId", "patientInfo"],
        ),
    ),
)

PARAMS: Dict[ToolName, Type[ToolParams]] = {
    ToolName.COMPANY_FEATURES: NoParams,
    ToolName.COMPANY_LANGUAGES: NoParams,
    ToolName.BOOKABLE_SERVICES: BookableServicesParams,
    ToolName.BOOKABLE_DOCTORS: NoParams,
    ToolName.AVAILABLE_SLOTS: AvailableSlotsParams,
    ToolName.REQUEST_SLOT: RequestSlotParams,
}


def list_tools() -> List[Dict[str, Any]]:
    """Wire form of the registry, in declaration order."""
    return [tool.to_wire() for tool in TOOLS]

