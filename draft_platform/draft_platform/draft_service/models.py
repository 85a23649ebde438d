from sqlalchemy import Column, Integer, String, Boolean, Float, JSON, DateTime
from datetime import datetime
from .config import settings
from .db import Base
import uuid

STAT_FIELDS = ("runs", "wickets", "strikeRate", "economy")


def _new_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"
    id = Column(String, primary_key=True, default=_new_id)
    username = Column(String, unique=True, index=True, nullable=False)
    # salted hash, never plaintext
    password = Column(String, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)
    budget = Column(Float, default=lambda: settings.DEFAULT_BUDGET, nullable=False)
    # ordered list of player identifiers, not checked against players
    team = Column(JSON, default=list, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self) -> dict:
        """
        Serialize the user for API responses.

        The password hash is never part of the result.
        """
        return {
            "id": self.id,
            "username": self.username,
            "isAdmin": bool(self.is_admin),
            "budget": self.budget,
            "team": list(self.team or []),
        }


class Player(Base):
    __tablename__ = "players"
    # insertion order for listings
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=_new_id)
    name = Column(String, nullable=False)
    university = Column(String, nullable=False)
    category = Column(String, nullable=False)
    stats = Column(JSON, default=dict, nullable=False)
    value = Column(Float, default=0, nullable=False)
    points = Column(Float, default=0, nullable=False)

    def to_dict(self) -> dict:
        stats = self.stats or {}
        return {
            "id": self.id,
            "name": self.name,
            "university": self.university,
            "category": self.category,
            "stats": {field: stats.get(field, 0) for field in STAT_FIELDS},
            "value": self.value,
            "points": self.points,
        }
