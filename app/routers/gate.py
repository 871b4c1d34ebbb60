# app/routers/gate.py
"""
Gate endpoints shared by every client.
build_gate_router() wires the five gate actions to visitor_service for one ClientProfile;
mobile_gate and web_gate only choose the profile and the check-in body.
"""

from typing import Type
from fastapi import APIRouter, Depends
from app.routers.deps import get_store
from app.schemas.visitor import (
    WebCheckIn, CheckOutRequest, GateActionOut, GateSummaryOut, VisitorOut, visitor_out,
)
from app.services import visitor_service
from app.services.visitor_service import ClientProfile
from app.services.visitor_store import VisitorStore
from app.services.visitor_validator import CheckInForm


def build_gate_router(profile: ClientProfile, check_in_schema: Type[WebCheckIn], label: str) -> APIRouter:
    router = APIRouter(prefix=f"/{profile.name}")

    @router.post("/check-in", response_model=GateActionOut, summary=f"{label} — check in a visitor")
    def check_in(body: check_in_schema, store: VisitorStore = Depends(get_store)):
        form = CheckInForm(
            id_number=body.id_number,
            first_name=body.first_name,
            last_name=body.last_name,
            car_plate=body.car_plate,
            mobile_number=getattr(body, "mobile_number", None),
        )
        record = visitor_service.check_in(store, form, profile)
        return GateActionOut(
            status="checked_in",
            message=f"{record.first_name} {record.last_name} checked in successfully!",
            visitor=visitor_out(record),
        )

    @router.post("/check-out", response_model=GateActionOut, summary=f"{label} — check out by ID number")
    def check_out(body: CheckOutRequest, store: VisitorStore = Depends(get_store)):
        record = visitor_service.check_out(store, body.id_number, profile)
        return GateActionOut(
            status="checked_out",
            message=f"{record.first_name} {record.last_name} checked out successfully!",
            visitor=visitor_out(record),
        )

    @router.get("/visitors/active", response_model=list[VisitorOut], summary=f"{label} — currently inside")
    def active_visitors(store: VisitorStore = Depends(get_store)):
        return [visitor_out(r) for r in visitor_service.active_visitors(store)]

    @router.get("/visitors/recent", response_model=list[VisitorOut], summary=f"{label} — recent activity")
    def recent_activity(store: VisitorStore = Depends(get_store)):
        return [visitor_out(r) for r in visitor_service.recent_activity(store, profile)]

    @router.get("/visitors/summary", response_model=GateSummaryOut, summary=f"{label} — gate counters")
    def gate_summary(store: VisitorStore = Depends(get_store)):
        return visitor_service.gate_summary(store)

    return router
