from fastapi import APIRouter, Depends, HTTPException
from typing import List
from healthconnect import directory
from healthconnect.schemas import ChatExchangeOut, ChatMessageOut, MessageIn, UserOut
from healthconnect.services import chat
from healthconnect.services.auth import current_user

router = APIRouter(prefix="/chat", tags=["chat"])


def _check_doctor(doctor_id: str):
	if not directory.get_doctor(doctor_id):
		raise HTTPException(status_code=404, detail="Doctor not found")

@router.get("/{doctor_id}", response_model=List[ChatMessageOut])
def history(doctor_id: str, user: UserOut = Depends(current_user)):
	_check_doctor(doctor_id)
	return chat.conversation(user.user_id, doctor_id)

@router.post("/{doctor_id}/messages", response_model=ChatExchangeOut)
async def send_message(doctor_id: str, payload: MessageIn, user: UserOut = Depends(current_user)):
	_check_doctor(doctor_id)
	try:
		sent, reply = await chat.send(user.user_id, doctor_id, payload.content)
	except ValueError as ve:
		raise HTTPException(status_code=400, detail=str(ve))
	return ChatExchangeOut(message=sent, reply=reply)

@router.delete("/{doctor_id}", response_model=List[ChatMessageOut])
def restart(doctor_id: str, user: UserOut = Depends(current_user)):
	_check_doctor(doctor_id)
	return chat.restart(user.user_id, doctor_id)
