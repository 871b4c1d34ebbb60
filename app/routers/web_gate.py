# app/routers/web_gate.py
"""Web desk endpoints for the browser gate page. No mobile number; history shows the last 20 visits."""

from app.routers.gate import build_gate_router
from app.schemas.visitor import WebCheckIn
from app.services.visitor_service import WEB_DESK

router = build_gate_router(WEB_DESK, WebCheckIn, label="Desk")
