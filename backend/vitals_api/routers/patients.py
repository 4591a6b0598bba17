import uuid

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from vitals_api.auth import get_current_user
from vitals_api.database import get_db
from vitals_api.schemas.patient import MessageResponse, PatientCreate, PatientResponse, PatientUpdate
from vitals_api.services import patient_store

router = APIRouter(dependencies=[Depends(get_current_user)])

ID_RESPONSES = {
    400: {"description": "Invalid ID format"},
    404: {"description": "Patient not found"},
}


def valid_patient_id(id: str = Path(..., description="Patient ID")) -> str:
    """Reject anything but a canonical hyphenated UUID before any lookup."""
    try:
        canonical = str(uuid.UUID(id))
    except ValueError:
        canonical = None
    # uuid.UUID also parses braced, urn: and bare-hex spellings.
    if canonical is None or canonical != id.lower():
        raise HTTPException(status_code=400, detail="Invalid patient ID format")
    return canonical


@router.get("", response_model=list[PatientResponse], summary="Get all patients")
async def list_patients(db: AsyncSession = Depends(get_db)):
    return await patient_store.list_patients(db)


@router.post("", response_model=PatientResponse, status_code=201, summary="Create a new patient")
async def create_patient(data: PatientCreate, db: AsyncSession = Depends(get_db)):
    return await patient_store.create_patient(db, data)


# Threshold routes must be registered before /{id}.
@router.get(
    "/highBP",
    response_model=list[PatientResponse],
    summary="Get patients with high blood pressure (systolic > 140)",
)
async def list_high_bp(db: AsyncSession = Depends(get_db)):
    return await patient_store.list_high_bp(db)


@router.get(
    "/lowBP",
    response_model=list[PatientResponse],
    summary="Get patients with low blood pressure (diastolic < 70)",
)
async def list_low_bp(db: AsyncSession = Depends(get_db)):
    return await patient_store.list_low_bp(db)


@router.get(
    "/hasFever",
    response_model=list[PatientResponse],
    summary="Get patients who have fever (temperature > 100.4°F)",
)
async def list_fever(db: AsyncSession = Depends(get_db)):
    return await patient_store.list_fever(db)


@router.get("/{id}", response_model=PatientResponse, summary="Get a patient by ID", responses=ID_RESPONSES)
async def get_patient(patient_id: str = Depends(valid_patient_id), db: AsyncSession = Depends(get_db)):
    return await patient_store.get_patient(db, patient_id)


@router.put("/{id}", response_model=PatientResponse, summary="Update patient vitals", responses=ID_RESPONSES)
async def update_patient(
    data: PatientUpdate,
    patient_id: str = Depends(valid_patient_id),
    db: AsyncSession = Depends(get_db),
):
    return await patient_store.update_patient(db, patient_id, data)


@router.delete("/{id}", response_model=MessageResponse, summary="Delete a patient", responses=ID_RESPONSES)
async def delete_patient(patient_id: str = Depends(valid_patient_id), db: AsyncSession = Depends(get_db)):
    await patient_store.delete_patient(db, patient_id)
    return MessageResponse(message="Patient removed")
