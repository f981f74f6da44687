from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from flight_manager.config import settings
import logging

# Configure basic logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Flight records with great-circle distance and fuel planning",
    version="1.0.0"
)

origins = ["*"]

if settings.env == "production":
    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]

logger.info(f"CORS origins: {origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from flight_manager.routers import airports, flights
app.include_router(airports.router)
app.include_router(flights.router)

@app.on_event("startup")
def startup_event():
    """
    Create tables and seed the airport list on first run.
    """
    from flight_manager.data_loader import seed_airports_if_empty
    from flight_manager.database import Base, SessionLocal, engine

    Base.metadata.create_all(bind=engine)
    if not settings.seed_on_startup:
        return

    db = SessionLocal()
    try:
        seeded = seed_airports_if_empty(db)
        if seeded:
            logger.info(f"Seeded {seeded} airports")
    finally:
        db.close()

@app.get("/health")
def health_check():
    """
    Basic health check endpoint to verify service is running.
    """
    return {"status": "ok", "environment": settings.env}
