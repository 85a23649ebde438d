"""
Player catalogue endpoints.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import DuplicateKeyError, get_db, save
from ..models import Player
from ..schemas import PlayerCreate, PlayerOut, PlayerResponse
from ..utils.http_errors import server_error

router = APIRouter(prefix="/api/players", tags=["players"])
logger = logging.getLogger(__name__)


@router.post("", response_model=PlayerResponse, status_code=status.HTTP_201_CREATED)
def add_player(payload: PlayerCreate, db: Session = Depends(get_db)):
    """Add a player. Names are not required to be unique."""
    player = Player(
        name=payload.name,
        university=payload.university,
        category=payload.category,
        stats=payload.stats.model_dump(by_alias=True),
        value=payload.value,
        points=payload.points,
    )
    try:
        save(db, player)
    except (SQLAlchemyError, DuplicateKeyError) as e:
        db.rollback()
        logger.exception("Error adding player %s", payload.name)
        raise server_error("Error adding player", e) from e

    logger.info("Player added: id=%s name=%s", player.id, player.name)
    return {"message": "Player added successfully", "player": player.to_dict()}


@router.get("", response_model=List[PlayerOut])
def list_players(db: Session = Depends(get_db)):
    """Return every player in insertion order."""
    try:
        players = db.query(Player).order_by(Player.seq.asc()).all()
    except SQLAlchemyError as e:
        logger.exception("Error fetching players")
        raise server_error("Error fetching players", e) from e
    return [p.to_dict() for p in players]
