from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import datetime
from typing import Optional


class PatientCreate(BaseModel):
    """Body of POST /api/patients. hasFever/medication are derived, never accepted."""
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    systolic_blood_pressure: float = Field(..., alias="systolicbloodPressure")
    diastolic_blood_pressure: float = Field(..., alias="diastolicbloodPressure")
    pulse_rate: float = Field(..., alias="pulseRate")
    temperature: float


class PatientUpdate(BaseModel):
    """Partial vitals update.

    A field left out of the body stays unchanged. Use ``model_fields_set`` (or
    ``model_dump(exclude_unset=True)``) to tell an absent field from a supplied
    one; supplying ``null`` for a vital is rejected.
    """
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    systolic_blood_pressure: Optional[float] = Field(None, alias="systolicbloodPressure")
    diastolic_blood_pressure: Optional[float] = Field(None, alias="diastolicbloodPressure")
    pulse_rate: Optional[float] = Field(None, alias="pulseRate")
    temperature: Optional[float] = None

    @model_validator(mode="after")
    def _reject_explicit_null(self):
        nulls = [name for name in self.model_fields_set if getattr(self, name) is None]
        if nulls:
            raise ValueError(f"vitals cannot be null: {', '.join(sorted(nulls))}")
        return self


class PatientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    age: int
    systolic_blood_pressure: float = Field(serialization_alias="systolicbloodPressure")
    diastolic_blood_pressure: float = Field(serialization_alias="diastolicbloodPressure")
    pulse_rate: float = Field(serialization_alias="pulseRate")
    temperature: float
    has_fever: bool = Field(False, serialization_alias="hasFever")
    medication: str = "No medication"
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(None, serialization_alias="updatedAt")


class MessageResponse(BaseModel):
    message: str
