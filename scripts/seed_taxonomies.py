#!/usr/bin/env python3
"""
Seed script to initialize job posting locations and employment types.

Usage:
    python scripts/seed_taxonomies.py
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from sqlalchemy.orm import Session
from app.database import SessionLocal
from app import models


LOCATIONS = [
    "Seoul",
    "Gyeonggi",
    "Incheon",
    "Busan",
    "Daegu",
    "Daejeon",
    "Gwangju",
    "Jeju",
    "Remote",
]

EMPLOYMENT_TYPES = [
    "Full-time",
    "Part-time",
    "Contract",
    "Internship",
    "New grad",
    "Experienced",
]


def seed_table(db: Session, model, names: list[str]) -> int:
    """Insert every name not already present. Returns how many were added."""
    label = model.__tablename__
    print(f"Seeding {label}...")

    added = 0
    for name in names:
        existing = db.query(model).filter(model.name == name).first()
        if existing:
            print(f"  '{name}' already exists, skipping.")
            continue

        db.add(model(name=name))
        added += 1
        print(f"  Added {name}")

    db.commit()
    return added


def seed_taxonomies(db: Session) -> None:
    locations = seed_table(db, models.Location, LOCATIONS)
    employment_types = seed_table(db, models.EmploymentType, EMPLOYMENT_TYPES)
    print(f"Done! {locations} locations and {employment_types} employment types added.")


if __name__ == "__main__":
    db = SessionLocal()
    try:
        seed_taxonomies(db)
    finally:
        db.close()
