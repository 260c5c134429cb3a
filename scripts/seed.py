import asyncio
import json
import os
import sys
from datetime import datetime, timedelta

# Add parent directory to path when run as a script
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import AsyncSessionLocal, engine, Base
from loggers import app_logger
from models import Doctor, Task
from repositories.doctor import DoctorRepository
from repositories.task import TaskRepository

# Reads JSON file (file IO is blocking here but it's fast enough for seed data)
def load_json(filename):
    script_dir = os.path.dirname(__file__)
    file_path = os.path.join(script_dir, "..", "seed_data", filename)
    with open(file_path, "r", encoding="utf-8") as f:
        return json.load(f)

async def seed_data(now: datetime = None):
    """Fill empty collections with sample doctors and tasks; existing data is left alone."""
    now = now or datetime.now()

    async with AsyncSessionLocal() as session:
        doctor_repo = DoctorRepository(session)
        doctors = await doctor_repo.get_all()
        if not doctors:
            app_logger.info("Seeding doctors...")
            doctors = [
                Doctor(**d, created_at=now, updated_at=now)
                for d in load_json("doctor.json")
            ]
            await doctor_repo.replace_all(doctors)
            doctors = await doctor_repo.get_all()

        task_repo = TaskRepository(session)
        if not await task_repo.get_all():
            app_logger.info("Seeding tasks...")
            # Due dates are relative so the sample always has upcoming and overdue work.
            tasks = [
                Task(
                    doctor_id=doctors[t["doctor_index"]].id if doctors else None,
                    title=t["title"],
                    description=t["description"],
                    due_date=(now + timedelta(days=t["due_in_days"])).isoformat(),
                    completed=t["completed"],
                    created_at=now - timedelta(days=t["created_days_ago"]),
                )
                for t in load_json("task.json")
            ]
            await task_repo.replace_all(tasks)

async def main():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await seed_data()
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
