# app/schemas/visitor.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional
from app.utils.formatting import format_time, format_duration


class WebCheckIn(BaseModel):
    # Loose optional strings: field rules live in visitor_validator so errors keep their gate codes
    id_number: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    car_plate: Optional[str] = None

    class Config:
        coerce_numbers_to_str = True   # numeric keypad clients may send 24807965


class MobileCheckIn(WebCheckIn):
    mobile_number: Optional[str] = None


class CheckOutRequest(BaseModel):
    id_number: Optional[str] = None

    class Config:
        coerce_numbers_to_str = True


class VisitorOut(BaseModel):
    id: int
    id_number: str
    mobile_number: Optional[str] = None
    first_name: str
    last_name: str
    car_plate: Optional[str]
    status: str
    time_in: datetime
    time_out: Optional[datetime]
    created_at: Optional[datetime]
    time_in_display: Optional[str] = None
    time_out_display: Optional[str] = None
    duration: Optional[str] = None

    class Config:
        from_attributes = True


class GateActionOut(BaseModel):
    status: str        # checked_in | checked_out
    message: str
    visitor: VisitorOut


class GateSummaryOut(BaseModel):
    date: str
    currently_inside: int
    checked_in_today: int
    checked_out_today: int


def visitor_out(record) -> VisitorOut:
    """VisitorOut with display strings filled in for the gate screens."""
    out = VisitorOut.model_validate(record)
    out.time_in_display = format_time(record.time_in)
    out.time_out_display = format_time(record.time_out)
    out.duration = format_duration(record.time_in, record.time_out)
    return out
