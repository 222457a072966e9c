"""
Seed script - populates the database with sample data for development.

Usage:
    python -m scripts.seed

This script is IDEMPOTENT - running it twice won't create duplicates.
It checks for existing data before inserting.
"""
import asyncio
from decimal import Decimal

from sqlalchemy import select

from jobly.core.database import async_session_maker, init_db
from jobly.core.security import hash_password
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.models.user import User


# ─── Users ─────────────────────────────────────────────────────

USERS = [
    {
        "username": "testuser",
        "password": "password",
        "first_name": "Test",
        "last_name": "User",
        "email": "test@example.com",
        "is_admin": False,
    },
    {
        "username": "testadmin",
        "password": "password",
        "first_name": "Test",
        "last_name": "Admin!",
        "email": "admin@example.com",
        "is_admin": True,
    },
]


# ─── Companies ─────────────────────────────────────────────────

COMPANIES = [
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "num_employees": 862,
        "description": "Difficult ready trip question produce produce someone.",
        "logo_url": None,
    },
    {
        "handle": "edwards-lee-reese",
        "name": "Edwards, Lee and Reese",
        "num_employees": 744,
        "description": "To much recent it reality coach decision Mr.",
        "logo_url": "/logos/logo2.png",
    },
    {
        "handle": "hall-mills",
        "name": "Hall-Mills",
        "num_employees": 266,
        "description": "Change fear color. Professor light dog.",
        "logo_url": "/logos/logo3.png",
    },
    {
        "handle": "watson-davis",
        "name": "Watson-Davis",
        "num_employees": 819,
        "description": "Year join loss.",
        "logo_url": "/logos/logo3.png",
    },
]


# ─── Jobs ──────────────────────────────────────────────────────
# Keyed by company handle

JOBS = {
    "bauer-gallagher": [
        {"title": "Conservator, furniture", "salary": 110000, "equity": Decimal("0")},
        {"title": "Information officer", "salary": 200000, "equity": None},
    ],
    "edwards-lee-reese": [
        {"title": "Consulting civil engineer", "salary": 60000, "equity": Decimal("0")},
    ],
    "hall-mills": [
        {"title": "Accountant, chartered public finance", "salary": 121000, "equity": Decimal("0.03")},
        {"title": "Engineer, broadcasting (operations)", "salary": 150000, "equity": Decimal("0.082")},
    ],
    "watson-davis": [
        {"title": "Early years teacher", "salary": 90000, "equity": Decimal("0.05")},
    ],
}


async def seed():
    await init_db()

    async with async_session_maker() as db:
        print("Seeding users...")
        for data in USERS:
            existing = await db.get(User, data["username"])
            if existing:
                print(f"  {data['username']} already exists, skipping...")
                continue
            db.add(User(**{**data, "password": hash_password(data["password"])}))
            print(f"  Created {data['username']}")
        await db.flush()

        print("Seeding companies and jobs...")
        for data in COMPANIES:
            existing = await db.get(Company, data["handle"])
            if existing:
                print(f"  {data['handle']} already exists, skipping...")
                continue
            db.add(Company(**data))
            await db.flush()

            for job in JOBS.get(data["handle"], []):
                db.add(Job(company_handle=data["handle"], **job))
            await db.flush()

            job_ids = (await db.execute(
                select(Job.id).where(Job.company_handle == data["handle"])
            )).scalars().all()
            print(f"  Created {data['handle']} with {len(job_ids)} jobs")

        # Commit everything
        await db.commit()
        print()
        print("Seed complete!")
        for data in USERS:
            print(f"  Login: {data['username']} / {data['password']}")


if __name__ == "__main__":
    asyncio.run(seed())
