# app/models/visitor.py
"""
Visitors table: one row per visit (check-in → check-out cycle).
Written only by visitor_service through VisitorStore; never deleted.
"""

from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base

STATUS_INSIDE = "inside"
STATUS_LEFT = "left"


class Visitor(Base):
    __tablename__ = "visitors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    id_number = Column(String(8), nullable=False, index=True)   # not unique: one row per visit
    mobile_number = Column(String(20))           # 254XXXXXXXXX (mobile kiosk only)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    car_plate = Column(String(10))
    time_in = Column(DateTime, nullable=False, index=True)
    time_out = Column(DateTime)                  # set once at check-out
    status = Column(String(10), nullable=False, default=STATUS_INSIDE, index=True)  # inside | left
    created_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Visitor {self.id} id_number={self.id_number} status={self.status}>"
