# app/routers/mobile_gate.py
"""
Mobile kiosk endpoints for the gateman phone app.
Check-in requires a Kenyan mobile number; history shows the last 50 visits.
"""

from app.routers.gate import build_gate_router
from app.schemas.visitor import MobileCheckIn
from app.services.visitor_service import MOBILE_KIOSK

router = build_gate_router(MOBILE_KIOSK, MobileCheckIn, label="Kiosk")
