from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import CORS_ORIGINS, SEED_SAMPLE_DATA
from database import engine, Base
from loggers import app_logger
from api.controllers import patients, doctors, appointments, consultations, tasks, medicines, analytics

from scripts.seed import seed_data

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Create tables
    async with engine.begin() as conn:
        # In production, we might use alembic instead of create_all
        await conn.run_sync(Base.metadata.create_all)

    if SEED_SAMPLE_DATA:
        await seed_data()
    else:
        app_logger.info("Sample data seeding disabled.")

    app_logger.info("Clinic dashboard API started")
    yield
    # Shutdown
    await engine.dispose()

app = FastAPI(title="Clinic Dashboard API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(patients.router)
app.include_router(doctors.router)
app.include_router(appointments.router)
app.include_router(consultations.router)
app.include_router(tasks.router)
app.include_router(medicines.router)
app.include_router(analytics.router)

@app.get("/")
async def root():
    return {"message": "Clinic Dashboard API is running"}
