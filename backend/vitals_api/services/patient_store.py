"""
Patient record store.

Every write goes through here so that ``has_fever`` and ``medication`` are
always derived from the stored vitals. Concurrent updates to the same patient
are last-write-wins; there is no version column.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vitals_api.exceptions import PatientNotFoundError
from vitals_api.models.patient import Patient
from vitals_api.schemas.patient import PatientCreate, PatientUpdate
from vitals_api.services.vitals import (
    HIGH_SYSTOLIC_THRESHOLD,
    LOW_DIASTOLIC_THRESHOLD,
    determine_medication,
    has_fever,
)

logger = logging.getLogger(__name__)


async def create_patient(db: AsyncSession, data: PatientCreate) -> Patient:
    fever = has_fever(data.temperature)
    patient = Patient(
        **data.model_dump(),
        has_fever=fever,
        medication=determine_medication(
            data.systolic_blood_pressure, data.diastolic_blood_pressure, fever
        ),
    )
    db.add(patient)
    await db.commit()
    await db.refresh(patient)
    logger.info("Created patient %s (medication=%r)", patient.id, patient.medication)
    return patient


async def list_patients(db: AsyncSession) -> list[Patient]:
    result = await db.execute(select(Patient))
    return list(result.scalars().all())


async def get_patient(db: AsyncSession, patient_id: str) -> Patient:
    patient = await db.get(Patient, patient_id)
    if patient is None:
        raise PatientNotFoundError(patient_id)
    return patient


async def update_patient(db: AsyncSession, patient_id: str, data: PatientUpdate) -> Patient:
    """Apply the supplied vitals, then re-derive fever and medication."""
    patient = await get_patient(db, patient_id)

    update_data = data.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(patient, key, value)
    if "temperature" in update_data:
        patient.has_fever = has_fever(patient.temperature)

    patient.medication = determine_medication(
        patient.systolic_blood_pressure,
        patient.diastolic_blood_pressure,
        patient.has_fever,
    )

    await db.commit()
    await db.refresh(patient)
    logger.info("Updated patient %s fields=%s", patient.id, sorted(update_data))
    return patient


async def delete_patient(db: AsyncSession, patient_id: str) -> None:
    patient = await get_patient(db, patient_id)
    await db.delete(patient)
    await db.commit()
    logger.info("Deleted patient %s", patient_id)


async def list_high_bp(db: AsyncSession) -> list[Patient]:
    result = await db.execute(
        select(Patient).where(Patient.systolic_blood_pressure > HIGH_SYSTOLIC_THRESHOLD)
    )
    return list(result.scalars().all())


async def list_low_bp(db: AsyncSession) -> list[Patient]:
    result = await db.execute(
        select(Patient).where(Patient.diastolic_blood_pressure < LOW_DIASTOLIC_THRESHOLD)
    )
    return list(result.scalars().all())


async def list_fever(db: AsyncSession) -> list[Patient]:
    result = await db.execute(select(Patient).where(Patient.has_fever.is_(True)))
    return list(result.scalars().all())
