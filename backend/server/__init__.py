"""Server — FastAPI app creation, middleware, startup."""

from dotenv import load_dotenv
load_dotenv(override=True)

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from server.database import init_db
from server.config import ALLOWED_ORIGINS, APP_VERSION, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

from exams.routes import router as exams_router
from plans.routes import router as plans_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup: initializing database")
    init_db()
    yield
    logger.info("Application shutdown")

app = FastAPI(title="Study Plan API", version=APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=ALLOWED_ORIGINS != ["*"],
)


# ─── API routes ──────────────────────────────────────────────
app.include_router(exams_router, tags=["exams"])
app.include_router(plans_router, tags=["plans"])


@app.get("/health")
def health_check():
    return {"status": "ok", "version": APP_VERSION}
