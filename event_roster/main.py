import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from event_roster.core.config import get_cors_origins
from event_roster.core.logging_config import configure_logging
from event_roster.database.db import init_db
from event_roster.routes import events, reports, roster

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # Create all tables (in production, use migrations such as Alembic)
    init_db()
    logger.info("Event roster service started")
    yield


app = FastAPI(title="Event Roster", lifespan=lifespan)

# Configure CORS
origins = get_cors_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

# Include the routers
app.include_router(events.router)
app.include_router(roster.router)
app.include_router(reports.router)
