import uuid

from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime
from sqlalchemy.sql import func

from vitals_api.database import Base


class Patient(Base):
    __tablename__ = "patients"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(200), nullable=False)
    age = Column(Integer, nullable=False)
    systolic_blood_pressure = Column(Float, nullable=False, index=True)
    diastolic_blood_pressure = Column(Float, nullable=False, index=True)
    pulse_rate = Column(Float, nullable=False)
    temperature = Column(Float, nullable=False)
    # Derived from the vitals above; written only by the record store.
    has_fever = Column(Boolean, nullable=False, default=False, index=True)
    medication = Column(String(100), nullable=False, default="No medication")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
