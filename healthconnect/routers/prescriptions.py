from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from datetime import date, timezone
from typing import List
from zoneinfo import ZoneInfo
from healthconnect.config import settings
from healthconnect.db import get_db
from healthconnect import models
from healthconnect.integrations.notifications import push_notification
from healthconnect.schemas import DoseOut, PrescriptionIn, PrescriptionOut, PrescriptionUpdate, SuggestionOut, UserOut
from healthconnect.services.auth import current_user
from healthconnect.services.prompts import ask
from healthconnect.store import utcnow
from healthconnect.logger import get_logger

router = APIRouter(prefix="/prescriptions", tags=["prescriptions"])
log = get_logger("prescriptions")


def _prescription_or_404(db: Session, owner_id: str, prescription_id: int) -> models.Prescription:
	p = db.query(models.Prescription).filter(
		models.Prescription.prescription_id == prescription_id,
		models.Prescription.owner_id == owner_id,
	).first()
	if not p:
		raise HTTPException(status_code=404, detail="Prescription not found")
	return p


def _check(p: models.Prescription):
	if not (p.medication or "").strip() or not (p.dosage or "").strip():
		raise HTTPException(status_code=400, detail="Add at least one medication")
	if p.end_date and p.end_date < p.start_date:
		raise HTTPException(status_code=400, detail="End date cannot be before start date")


def _as_data(p: models.Prescription) -> dict:
	return PrescriptionOut.model_validate(p).model_dump(mode="json")

@router.get("", response_model=List[PrescriptionOut])
def list_prescriptions(user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	return db.query(models.Prescription).filter(
		models.Prescription.owner_id == user.user_id,
	).order_by(models.Prescription.prescription_id.desc()).all()

@router.post("", response_model=PrescriptionOut)
def add_prescription(payload: PrescriptionIn, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	p = models.Prescription(
		owner_id=user.user_id,
		medication=payload.medication.strip(),
		dosage=payload.dosage.strip(),
		start_date=payload.start_date or date.today(),
		end_date=payload.end_date,
		notes=payload.notes,
	)
	_check(p)
	db.add(p)
	db.commit()
	db.refresh(p)
	push_notification(user.user_id, "success", "Prescription Added", f"{p.medication} added to your medications")
	return p

@router.get("/{prescription_id}", response_model=PrescriptionOut)
def get_prescription(prescription_id: int, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	return _prescription_or_404(db, user.user_id, prescription_id)

@router.patch("/{prescription_id}", response_model=PrescriptionOut)
def update_prescription(prescription_id: int, payload: PrescriptionUpdate, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	p = _prescription_or_404(db, user.user_id, prescription_id)
	updates = payload.model_dump(exclude_unset=True)
	for k in ("medication", "dosage"):
		if updates.get(k) is not None:
			updates[k] = updates[k].strip()
	if updates.get("start_date") is None:
		updates.pop("start_date", None)
	for k, v in updates.items():
		setattr(p, k, v)
	try:
		_check(p)
	except HTTPException:
		db.rollback()
		raise
	db.commit()
	db.refresh(p)
	push_notification(user.user_id, "success", "Prescription Updated", f"{p.medication} has been updated")
	return p

@router.delete("/{prescription_id}")
def remove_prescription(prescription_id: int, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	p = _prescription_or_404(db, user.user_id, prescription_id)
	medication = p.medication
	db.delete(p)
	db.commit()
	push_notification(user.user_id, "info", "Prescription Deleted", f"{medication} has been removed")
	return {"prescription_id": prescription_id, "removed": True}

@router.post("/{prescription_id}/sync", response_model=PrescriptionOut)
def sync_prescription(prescription_id: int, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	p = _prescription_or_404(db, user.user_id, prescription_id)
	p.gemini_summary = ask("prescription", data=_as_data(p))
	p.synced_at = utcnow()
	db.commit()
	db.refresh(p)
	log.info("Synced prescription %s", prescription_id)
	return p

@router.post("/{prescription_id}/suggestions", response_model=SuggestionOut)
def suggest(prescription_id: int, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	p = _prescription_or_404(db, user.user_id, prescription_id)
	everything = db.query(models.Prescription).filter(
		models.Prescription.owner_id == user.user_id,
	).order_by(models.Prescription.prescription_id).all()
	summary = ask("ai_suggest_rx", data=_as_data(p), all_prescriptions=[_as_data(x) for x in everything])
	return SuggestionOut(summary=summary)

@router.post("/{prescription_id}/taken", response_model=DoseOut)
def mark_taken(prescription_id: int, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	p = _prescription_or_404(db, user.user_id, prescription_id)
	dose = models.DoseLog(prescription_id=p.prescription_id, taken_at=utcnow())
	db.add(dose)
	db.commit()
	db.refresh(dose)
	local = dose.taken_at.replace(tzinfo=timezone.utc).astimezone(ZoneInfo(settings.timezone))
	push_notification(user.user_id, "success", "Prescription Taken", f"You took {p.medication} at {local.strftime('%H:%M:%S')}")
	return dose

@router.get("/{prescription_id}/taken", response_model=List[DoseOut])
def doses_taken(prescription_id: int, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	p = _prescription_or_404(db, user.user_id, prescription_id)
	return p.doses
