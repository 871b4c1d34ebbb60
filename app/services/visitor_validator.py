# app/services/visitor_validator.py
"""
Gate form validation. Pure, synchronous, no I/O.
Runs before any store call; raises the first InvalidInput error found,
checking fields in form order: ID, mobile (kiosk only), names, car plate.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from app.services.errors import InvalidId, InvalidMobile, MissingName, InvalidPlate

ID_NUMBER_RE = re.compile(r"[0-9]{8}")
# Optional 254 / +254 / 0 prefix, then 9 digits starting with 1 or 7
MOBILE_RE = re.compile(r"(?:254|\+254|0)?([17][0-9]{8})")
# Kenyan plate: KBM243T
CAR_PLATE_RE = re.compile(r"[A-Z]{3}[0-9]{3}[A-Z]")
COUNTRY_CODE = "254"


@dataclass
class CheckInForm:
    id_number: str
    first_name: str
    last_name: str
    car_plate: Optional[str] = None
    mobile_number: Optional[str] = None


@dataclass
class CleanCheckIn:
    id_number: str
    first_name: str
    last_name: str
    car_plate: Optional[str]
    mobile_number: Optional[str]


def validate_id_number(value: Optional[str], message: str = None) -> str:
    if not value or not ID_NUMBER_RE.fullmatch(value):
        raise InvalidId(message)
    return value


def normalize_mobile_number(value: Optional[str]) -> str:
    """0712345678 / 712345678 / +254712345678 → 254712345678."""
    match = MOBILE_RE.fullmatch((value or "").strip())
    if not match:
        raise InvalidMobile()
    return COUNTRY_CODE + match.group(1)


def validate_names(first_name: Optional[str], last_name: Optional[str]) -> Tuple[str, str]:
    first = (first_name or "").strip()
    last = (last_name or "").strip()
    if not first or not last:
        raise MissingName()
    return first, last


def normalize_car_plate(value: Optional[str]) -> Optional[str]:
    """Uppercased plate, or None when the optional field was left blank."""
    plate = (value or "").strip().upper()
    if not plate:
        return None
    if not CAR_PLATE_RE.fullmatch(plate):
        raise InvalidPlate()
    return plate


def validate_check_in(form: CheckInForm, require_mobile: bool = False) -> CleanCheckIn:
    id_number = validate_id_number(form.id_number)
    mobile_number = normalize_mobile_number(form.mobile_number) if require_mobile else None
    first_name, last_name = validate_names(form.first_name, form.last_name)
    car_plate = normalize_car_plate(form.car_plate)
    return CleanCheckIn(
        id_number=id_number,
        first_name=first_name,
        last_name=last_name,
        car_plate=car_plate,
        mobile_number=mobile_number,
    )
