import asyncio
import random
from datetime import timedelta
from typing import List
from healthconnect.config import settings
from healthconnect.directory import DOCTORS
from healthconnect.schemas import ChatMessageOut, SuggestedDoctor
from healthconnect.store import store, utcnow, new_id

DOCTOR_GREETING = "Hello! How can I help you today?"

MOCK_RESPONSES = [
	"I understand your concern. Could you tell me more about when these symptoms started?",
	"Based on what you've described, I'd recommend scheduling an in-person visit for a thorough examination.",
	"That's a common symptom. Have you noticed any other changes recently?",
	"I'll prescribe something that should help. Please follow the dosage instructions carefully.",
	"Let's monitor this for a few days. If symptoms persist, please let me know.",
]

CONSULTATION_WELCOME = (
	"Hi! I'm your health consultation assistant. Tell me about your symptoms, health concerns, "
	"or medical history, and I'll recommend the best doctors on our platform to help you."
)

MAX_SUGGESTED_DOCTORS = 3


def _message(content: str, is_doctor: bool, when=None) -> ChatMessageOut:
	return ChatMessageOut(message_id=new_id(), content=content, is_doctor=is_doctor, timestamp=when or utcnow())


def conversation(user_id: str, doctor_id: str) -> List[ChatMessageOut]:
	key = (user_id, doctor_id)
	with store.lock:
		if key not in store.chats:
			store.chats[key] = [_message(DOCTOR_GREETING, True, utcnow() - timedelta(minutes=1))]
		return list(store.chats[key])


def restart(user_id: str, doctor_id: str) -> List[ChatMessageOut]:
	with store.lock:
		store.chats.pop((user_id, doctor_id), None)
	return conversation(user_id, doctor_id)


async def send(user_id: str, doctor_id: str, content: str) -> tuple[ChatMessageOut, ChatMessageOut]:
	if not content or not content.strip():
		raise ValueError("Message cannot be empty")
	conversation(user_id, doctor_id)
	sent = _message(content, False)
	with store.lock:
		store.chats[(user_id, doctor_id)].append(sent)

	# simulated typing delay
	await asyncio.sleep(settings.chat_reply_delay_seconds + random.random() * settings.chat_reply_jitter_seconds)

	reply = _message(random.choice(MOCK_RESPONSES), True)
	with store.lock:
		store.chats.setdefault((user_id, doctor_id), []).append(reply)
	return sent, reply


def suggested_doctors(text: str) -> List[SuggestedDoctor]:
	lowered = (text or "").lower()
	found = []
	for d in DOCTORS:
		if d.name.lower() in lowered or d.specialty.lower() in lowered:
			found.append(SuggestedDoctor(doctor_id=d.doctor_id, name=d.name, specialty=d.specialty))
	return found[:MAX_SUGGESTED_DOCTORS]
