"""In-process state: sessions, bookings, doctor chats and notifications.

Nothing here survives a restart. Medical records, prescriptions and the
consultation history live in the database instead (see models.py).
"""
import secrets
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple
from uuid import uuid4

from healthconnect.schemas import UserOut, BookingOut, ChatMessageOut, NotificationOut


def utcnow() -> datetime:
	# naive UTC, the form SQLite hands back
	return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
	return uuid4().hex


class AppStore:
	def __init__(self):
		self.lock = threading.RLock()
		self.reset()

	def reset(self):
		with self.lock:
			self.sessions: Dict[str, UserOut] = {}
			self.bookings: Dict[str, List[BookingOut]] = {}
			self.chats: Dict[Tuple[str, str], List[ChatMessageOut]] = {}
			self.notifications: Dict[str, List[NotificationOut]] = {}

	# sessions

	def open_session(self, user: UserOut) -> str:
		token = secrets.token_urlsafe(24)
		with self.lock:
			self.sessions[token] = user
		return token

	def user_for(self, token: str) -> Optional[UserOut]:
		with self.lock:
			return self.sessions.get(token)

	def close_session(self, token: str) -> bool:
		with self.lock:
			return self.sessions.pop(token, None) is not None

	# bookings

	def add_booking(self, user_id: str, **fields) -> BookingOut:
		booking = BookingOut(booking_id=new_id(), **fields)
		with self.lock:
			self.bookings.setdefault(user_id, []).append(booking)
		return booking

	def list_bookings(self, user_id: str) -> List[BookingOut]:
		with self.lock:
			return list(self.bookings.get(user_id, []))

	def get_booking(self, user_id: str, booking_id: str) -> Optional[BookingOut]:
		with self.lock:
			for b in self.bookings.get(user_id, []):
				if b.booking_id == booking_id:
					return b
		return None

	def update_booking(self, user_id: str, booking_id: str, **updates) -> Optional[BookingOut]:
		with self.lock:
			rows = self.bookings.get(user_id, [])
			for i, b in enumerate(rows):
				if b.booking_id == booking_id:
					rows[i] = b.model_copy(update=updates)
					return rows[i]
		return None

	def remove_booking(self, user_id: str, booking_id: str) -> bool:
		with self.lock:
			rows = self.bookings.get(user_id, [])
			kept = [b for b in rows if b.booking_id != booking_id]
			self.bookings[user_id] = kept
			return len(kept) != len(rows)


store = AppStore()
