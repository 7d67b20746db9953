from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from livecount.routers import page, shows
from livecount.scheduler import start_scheduler, stop_scheduler

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting livecount...")
    start_scheduler()
    yield
    logger.info("Shutting down...")
    stop_scheduler()


app = FastAPI(
    title="livecount — band performance history",
    description=(
        "How many shows has the band played? "
        "Show history is fetched from the Indistreet GraphQL API every 50 minutes."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(page.router, tags=["page"])
app.include_router(shows.router, tags=["shows"])


@app.get("/health", tags=["root"])
async def health():
    return {"status": "ok"}
