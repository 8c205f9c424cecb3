from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from datetime import date
from typing import List
from healthconnect.db import get_db
from healthconnect import models
from healthconnect.schemas import MedicalRecordIn, MedicalRecordOut, MedicalRecordUpdate, SuggestionOut, UserOut
from healthconnect.services.auth import current_user
from healthconnect.services.prompts import ask
from healthconnect.services.records import join_conditions
from healthconnect.store import utcnow
from healthconnect.logger import get_logger

router = APIRouter(prefix="/medical/records", tags=["medical"])
log = get_logger("medical")


def _record_or_404(db: Session, owner_id: str, record_id: int) -> models.MedicalRecord:
	rec = db.query(models.MedicalRecord).filter(
		models.MedicalRecord.record_id == record_id,
		models.MedicalRecord.owner_id == owner_id,
	).first()
	if not rec:
		raise HTTPException(status_code=404, detail="Record not found")
	return rec


def _as_data(rec: models.MedicalRecord) -> dict:
	return MedicalRecordOut.model_validate(rec).model_dump(mode="json")

@router.get("", response_model=List[MedicalRecordOut])
def list_records(user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	return db.query(models.MedicalRecord).filter(
		models.MedicalRecord.owner_id == user.user_id,
	).order_by(models.MedicalRecord.record_id.desc()).all()

@router.post("", response_model=MedicalRecordOut)
def add_record(payload: MedicalRecordIn, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	try:
		condition = join_conditions(payload.conditions)
	except ValueError as ve:
		raise HTTPException(status_code=400, detail=str(ve))
	rec = models.MedicalRecord(
		owner_id=user.user_id,
		date=payload.date or date.today(),
		condition=condition,
		notes=payload.notes,
	)
	db.add(rec)
	db.commit()
	db.refresh(rec)
	return rec

@router.get("/{record_id}", response_model=MedicalRecordOut)
def get_record(record_id: int, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	return _record_or_404(db, user.user_id, record_id)

@router.patch("/{record_id}", response_model=MedicalRecordOut)
def update_record(record_id: int, payload: MedicalRecordUpdate, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	rec = _record_or_404(db, user.user_id, record_id)
	updates = payload.model_dump(exclude_unset=True)
	if "conditions" in updates:
		try:
			rec.condition = join_conditions(updates.pop("conditions"))
		except ValueError as ve:
			raise HTTPException(status_code=400, detail=str(ve))
	if updates.get("date") is not None:
		rec.date = updates["date"]
	if "notes" in updates:
		rec.notes = updates["notes"]
	db.commit()
	db.refresh(rec)
	return rec

@router.delete("/{record_id}")
def remove_record(record_id: int, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	rec = _record_or_404(db, user.user_id, record_id)
	db.delete(rec)
	db.commit()
	return {"record_id": record_id, "removed": True}

@router.post("/{record_id}/sync", response_model=MedicalRecordOut)
def sync_record(record_id: int, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	rec = _record_or_404(db, user.user_id, record_id)
	rec.gemini_summary = ask("record", data=_as_data(rec))
	rec.synced_at = utcnow()
	db.commit()
	db.refresh(rec)
	log.info("Synced medical record %s", record_id)
	return rec

@router.post("/{record_id}/suggestions", response_model=SuggestionOut)
def suggest(record_id: int, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	rec = _record_or_404(db, user.user_id, record_id)
	history = db.query(models.MedicalRecord).filter(
		models.MedicalRecord.owner_id == user.user_id,
	).order_by(models.MedicalRecord.record_id).all()
	summary = ask("ai_suggest", data=_as_data(rec), all_records=[_as_data(r) for r in history])
	return SuggestionOut(summary=summary)
