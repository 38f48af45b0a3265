# eventboard/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from eventboard.api.v1.api import api_router
from eventboard.core.config import settings
from eventboard.core.exceptions import AppError
from eventboard.db.session import engine
from eventboard.middleware import app_error_handler, database_error_handler
from eventboard.models import Base

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Eventboard starting up...")
    # Schema migrations are not managed here; create whatever tables are missing.
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables checked and created if necessary.")
    yield
    logger.info("Eventboard shutting down...")


app = FastAPI(
    title="Eventboard Organizer Service",
    version="1.0.0",
    description="""
        **Eventboard** backs the organizer dashboard.

        ## Features

        * **Accounts**: Register, log in, change password, delete account
        * **Organizer profile**: Name, logo and website shown on event pages
        * **Events**: Create, update and delete events, plus their agenda,
          speakers, FAQs, attachments and comments
        * **Analytics**: Monthly and daily totals, ticket revenue, attendance
          extremes and no-show rates per year

        ## Authentication

        `POST /api/v1/login` sets an HTTP-only `session_token` cookie. Every
        other endpoint except `/register` and `/categories` requires it.
        """,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,  # the session cookie must cross origins
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
    max_age=3600,
)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(SQLAlchemyError, database_error_handler)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    return {"status": "Eventboard service is running"}
