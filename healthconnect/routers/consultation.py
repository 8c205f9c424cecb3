from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from healthconnect.db import get_db
from healthconnect import models
from healthconnect.schemas import ConsultationMessageOut, MessageIn, UserOut
from healthconnect.services.auth import current_user
from healthconnect.services.chat import CONSULTATION_WELCOME, suggested_doctors
from healthconnect.services.prompts import ask
from healthconnect.store import utcnow

router = APIRouter(prefix="/consultation", tags=["consultation"])


def _welcome() -> ConsultationMessageOut:
	return ConsultationMessageOut(role="assistant", content=CONSULTATION_WELCOME, created_at=utcnow())


def _history(db: Session, owner_id: str) -> List[models.ConsultationMessage]:
	return db.query(models.ConsultationMessage).filter(
		models.ConsultationMessage.owner_id == owner_id,
	).order_by(models.ConsultationMessage.message_id).all()

@router.get("", response_model=List[ConsultationMessageOut])
def history(user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	rows = _history(db, user.user_id)
	return rows or [_welcome()]

@router.post("/messages", response_model=ConsultationMessageOut)
def send_message(payload: MessageIn, user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	if not payload.content.strip():
		raise HTTPException(status_code=400, detail="Message cannot be empty")
	# kept even when the assistant call fails
	db.add(models.ConsultationMessage(owner_id=user.user_id, role="user", content=payload.content, created_at=utcnow()))
	db.commit()

	summary = ask("doctor_recommend", query=payload.content)
	suggested = [s.model_dump() for s in suggested_doctors(summary)]
	reply = models.ConsultationMessage(
		owner_id=user.user_id,
		role="assistant",
		content=summary,
		suggested_doctors=suggested or None,
		created_at=utcnow(),
	)
	db.add(reply)
	db.commit()
	db.refresh(reply)
	return reply

@router.delete("", response_model=List[ConsultationMessageOut])
def clear(user: UserOut = Depends(current_user), db: Session = Depends(get_db)):
	db.query(models.ConsultationMessage).filter(models.ConsultationMessage.owner_id == user.user_id).delete()
	db.commit()
	return [_welcome()]
