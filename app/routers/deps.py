# app/routers/deps.py
"""Shared FastAPI dependencies for the gate routers."""

from fastapi import Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.services.visitor_store import VisitorStore


def get_store(db: Session = Depends(get_db)) -> VisitorStore:
    """One VisitorStore per request, bound to the request's DB session."""
    return VisitorStore(db)
