"""
Insert synthetic patients with randomized vitals.
Run with: python -m scripts.seed_patients
Run with: python -m scripts.seed_patients --count 50 --seed 7
"""

import argparse
import asyncio
import random

from vitals_api.config import get_settings
from vitals_api.database import Database
from vitals_api.schemas.patient import PatientCreate
from vitals_api.services import patient_store

FIRST_NAMES = [
    "Emily", "Sarah", "Maria", "Jessica", "Mei", "Aisha", "Priya", "Fatima",
    "James", "Robert", "Michael", "David", "Wei", "Mohammed", "Raj", "Carlos",
]

LAST_NAMES = [
    "Johnson", "Williams", "Brown", "Garcia", "Miller", "Davis", "Chen", "Kim",
    "Patel", "Nguyen", "Singh", "Ali", "Okonkwo", "Tanaka", "Schmidt", "Santos",
]

# (systolic range, diastolic range, temperature range)
ARCHETYPES = [
    ((105, 135), (72, 88), (97.0, 99.5)),    # normal
    ((141, 185), (80, 100), (97.0, 99.5)),   # hypertensive
    ((85, 110), (50, 69), (97.0, 99.5)),     # hypotensive
    ((105, 135), (72, 88), (100.5, 103.5)),  # febrile
]


def random_patient(rng: random.Random) -> PatientCreate:
    systolic, diastolic, temperature = rng.choice(ARCHETYPES)
    return PatientCreate(
        name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
        age=rng.randint(18, 90),
        systolic_blood_pressure=rng.randint(*systolic),
        diastolic_blood_pressure=rng.randint(*diastolic),
        pulse_rate=rng.randint(55, 110),
        temperature=round(rng.uniform(*temperature), 1),
    )


async def seed(count: int, seed_value: int):
    rng = random.Random(seed_value)
    db = Database(get_settings())
    await db.create_all()
    async with db.session_factory() as session:
        for _ in range(count):
            await patient_store.create_patient(session, random_patient(rng))
    await db.dispose()
    print(f"Inserted {count} patients.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed synthetic patients")
    parser.add_argument("--count", type=int, default=20)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()
    asyncio.run(seed(args.count, args.seed))
