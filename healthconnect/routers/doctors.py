from fastapi import APIRouter, HTTPException
from typing import List
from healthconnect import directory
from healthconnect.schemas import DoctorOut

router = APIRouter(prefix="/doctors", tags=["doctors"])

@router.get("", response_model=List[DoctorOut])
def list_doctors(q: str | None = None, specialty: str | None = None):
	return directory.filter_doctors(q, specialty)

@router.get("/specialties", response_model=List[str])
def list_specialties():
	return directory.specialties()

@router.get("/{doctor_id}", response_model=DoctorOut)
def get_doctor(doctor_id: str):
	d = directory.get_doctor(doctor_id)
	if not d:
		raise HTTPException(status_code=404, detail="Doctor not found")
	return d
