from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import calculate, profiles, shapes

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("rebarcalc")

app = FastAPI(
    title="RebarCalc",
    description="Bar bending schedule calculation engine: cutting lengths, bar counts and steel weights",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(shapes.router, prefix="/api")
app.include_router(profiles.router, prefix="/api")
app.include_router(calculate.router, prefix="/api")

logger.info("%s ready (default profile %s, concrete %s)",
            settings.APP_NAME, settings.DEFAULT_PROFILE_ID, settings.DEFAULT_CONCRETE_GRADE)


@app.get("/health")
def health():
    return {"status": "ok", "app": "rebarcalc"}
