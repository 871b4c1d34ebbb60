# Gateman Visitor API — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.visitor import Visitor   # noqa
