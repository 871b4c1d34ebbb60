# app/services/visitor_service.py
"""
Visitor gate workflows: check-in, check-out, and the list views.
Shared by the mobile kiosk and web desk routers; each passes its ClientProfile.

How it works:
  - check_in  → validate form → query "inside" rows for the ID → insert (status=inside)
  - check_out → validate ID → query "inside" rows for the ID → update first match (status=left)
  - Active / recent lists and the gate summary are re-queried on every call

The "already inside" check is a separate read before the write, so two gates
checking in the same ID at the same moment can both succeed.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from app.config import settings
from app.models.visitor import Visitor, STATUS_INSIDE, STATUS_LEFT
from app.services.errors import AlreadyInside, NotInside, StoreUnavailable
from app.services.visitor_store import VisitorStore, SERVER_TIMESTAMP
from app.services.visitor_validator import CheckInForm, validate_check_in, validate_id_number
from app.utils.formatting import to_local
from app.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ClientProfile:
    name: str
    require_mobile: bool
    recent_limit: int


MOBILE_KIOSK = ClientProfile("mobile", require_mobile=True, recent_limit=settings.MOBILE_RECENT_LIMIT)
WEB_DESK = ClientProfile("web", require_mobile=False, recent_limit=settings.WEB_RECENT_LIMIT)


def _inside_records(store: VisitorStore, id_number: str) -> list:
    return store.query({"id_number": id_number, "status": STATUS_INSIDE})


def check_in(store: VisitorStore, form: CheckInForm, profile: ClientProfile = WEB_DESK) -> Visitor:
    clean = validate_check_in(form, require_mobile=profile.require_mobile)

    try:
        if _inside_records(store, clean.id_number):
            logger.warning(f"[{profile.name}] Check-in refused: ID {clean.id_number} already inside")
            raise AlreadyInside()

        record_id = store.insert({
            "id_number": clean.id_number,
            "mobile_number": clean.mobile_number,
            "first_name": clean.first_name,
            "last_name": clean.last_name,
            "car_plate": clean.car_plate,
            "time_in": SERVER_TIMESTAMP,
            "time_out": None,
            "status": STATUS_INSIDE,
            "created_at": SERVER_TIMESTAMP,
        })
        record = store.get(record_id)
    except StoreUnavailable:
        raise StoreUnavailable("Error during check-in. Please try again.")

    logger.info(f"[{profile.name}] Checked in ID={clean.id_number} | "
                f"{clean.first_name} {clean.last_name} | plate={clean.car_plate or '-'}")
    return record


def check_out(store: VisitorStore, id_number: str, profile: ClientProfile = WEB_DESK) -> Visitor:
    id_number = validate_id_number(id_number, "Please enter a valid 8-digit ID")

    try:
        inside = _inside_records(store, id_number)
        if not inside:
            logger.warning(f"[{profile.name}] Check-out refused: ID {id_number} not inside")
            raise NotInside()
        if len(inside) > 1:
            logger.warning(f"[{profile.name}] ID {id_number} has {len(inside)} open visits; closing id={inside[0].id}")

        visit = inside[0]
        store.update(visit.id, {"status": STATUS_LEFT, "time_out": SERVER_TIMESTAMP})
        record = store.get(visit.id)
    except StoreUnavailable:
        raise StoreUnavailable("Error during check-out. Please try again.")

    logger.info(f"[{profile.name}] Checked out ID={id_number} | {record.first_name} {record.last_name}")
    return record


def active_visitors(store: VisitorStore) -> list:
    """Everyone currently inside, latest arrival first."""
    return store.query({"status": STATUS_INSIDE}, order_by="time_in")


def recent_activity(store: VisitorStore, profile: ClientProfile = WEB_DESK) -> list:
    """Latest visits (inside or left), truncated to the client's history length."""
    return store.query(order_by="time_in", limit=profile.recent_limit)


def start_of_local_day(now: datetime) -> datetime:
    """Local midnight for `now` (naive UTC), returned as naive UTC."""
    local_midnight = to_local(now).replace(hour=0, minute=0, second=0, microsecond=0)
    return local_midnight.astimezone(timezone.utc).replace(tzinfo=None)


def gate_summary(store: VisitorStore) -> dict:
    now = store.clock()
    since = start_of_local_day(now)
    return {
        "date": str(to_local(now).date()),
        "currently_inside": store.count({"status": STATUS_INSIDE}),
        "checked_in_today": store.count(since=("time_in", since)),
        "checked_out_today": store.count({"status": STATUS_LEFT}, since=("time_out", since)),
    }
