"""
Spirit11 API - user accounts and the player catalogue for fantasy cricket drafting
"""
from fastapi import FastAPI, Depends, Request, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from contextlib import asynccontextmanager
import logging
import os
import sys

from .config import settings
from .db import DuplicateKeyError, close_db, get_db, init_db, save
from .models import User
from .schemas import UserSignup, UserLogin, UserResponse
from .auth import hash_password, verify_password
from .utils.event_logger import log_auth_event
from .utils.http_errors import bad_request, server_error
from .routes import health, players

VERSION = "1.0.0"

# Configure stdout and optional file logging
handlers = [logging.StreamHandler(sys.stdout)]
if settings.LOG_DIR:
    try:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(settings.LOG_DIR, "spirit11.log")))
    except OSError as e:
        print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    handlers=handlers
)

logger = logging.getLogger(__name__)

DUPLICATE_USERNAME = "Username already exists"


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Open the database on startup and release its connections on shutdown"""
    init_db()
    yield
    close_db()


app = FastAPI(
    title="Spirit11 API",
    description="User accounts and player catalogue for the Spirit11 fantasy cricket draft",
    version=VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(players.router)
app.include_router(health.router)


def find_user(db: Session, username: str):
    return db.query(User).filter(User.username == username).first()


@app.get("/")
def root():
    return {
        "service": "Spirit11 API",
        "version": VERSION,
        "status": "running"
    }


@app.post("/api/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def signup(payload: UserSignup, request: Request, db: Session = Depends(get_db)):
    """
    Create a user account.

    The existence check gives a friendly answer for the common case; two
    signups racing for the same username are settled by the unique index
    on users.username.
    """
    try:
        if find_user(db, payload.username):
            raise bad_request(DUPLICATE_USERNAME)

        user = save(db, User(
            username=payload.username,
            password=hash_password(payload.password),
            is_admin=False,
            budget=settings.DEFAULT_BUDGET,
            team=[],
        ))
    except DuplicateKeyError as e:
        logger.info("Signup lost race for username=%s", payload.username)
        raise bad_request(DUPLICATE_USERNAME) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error creating user %s", payload.username)
        raise server_error("Error creating user", e) from e

    log_auth_event("signup", user.username, request)
    return {"message": "User created successfully", "user": user.to_dict()}


@app.post("/api/login", response_model=UserResponse)
def login(credentials: UserLogin, request: Request, db: Session = Depends(get_db)):
    """Check a username/password pair. No session or token is issued."""
    try:
        user = find_user(db, credentials.username)
    except SQLAlchemyError as e:
        logger.exception("Error logging in %s", credentials.username)
        raise server_error("Error logging in", e) from e

    if not user:
        raise bad_request("User not found")

    if not verify_password(credentials.password, user.password):
        log_auth_event("login_failure", user.username, request)
        raise bad_request("Invalid password")

    log_auth_event("login_success", user.username, request)
    return {"message": "Login successful", "user": user.to_dict()}


if __name__ == "__main__":
    import uvicorn

    logger.info("Server is running on http://localhost:%s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
