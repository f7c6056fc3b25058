"""Local stand-in for the EasyBusy B2B API, for running the gateway without credentials."""

from typing import Any, Dict, Optional

import uvicorn
from fastapi import Body, FastAPI, Header, HTTPException, Query

app = FastAPI()

API_KEY = "dev-key"


def _check_key(key: Optional[str]) -> None:
    if key != API_KEY:
        raise HTTPException(status_code=401, detail="Invalid API key")


@app.get("/v2/company/features")
async def features(x_api_key: Optional[str] = Header(None)):
    _check_key(x_api_key)
    return {"simpleBooking": True, "onlinePayments": False}


@app.get("/v2/company/languages")
async def languages(x_api_key: Optional[str] = Header(None)):
    _check_key(x_api_key)
    return [{"code": "en"}, {"code": "sl"}]


@app.get("/v2/simple-booking/bookable-services")
async def bookable_services(languageCode: str, x_api_key: Optional[str] = Header(None)):
    _check_key(x_api_key)
    return [{"id": 7, "name": f"Check-up ({languageCode})"}]


@app.get("/v2/simple-booking/bookable-doctors")
async def bookable_doctors(x_api_key: Optional[str] = Header(None)):
    _check_key(x_api_key)
    return [{"id": 3, "name": "Dr. Novak"}]


@app.get("/v2/simple-booking/available-slots")
async def available_slots(
    languageCode: str,
    serviceId: int,
    doctorId: int,
    from_: str = Query(..., alias="from"),
    to: str = Query(...),
    x_api_key: Optional[str] = Header(None),
):
    _check_key(x_api_key)
    return [{"id": 42, "serviceId": serviceId, "doctorId": doctorId, "start": from_, "end": to}]


@app.post("/v2/simple-booking/request-slot/{slot_id}", status_code=201)
async def request_slot(
    slot_id: int,
    payload: Dict[str, Any] = Body(...),
    x_api_key: Optional[str] = Header(None),
):
    _check_key(x_api_key)
    return {"bookingId": slot_id, "serviceId": payload.get("serviceId")}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8082)
