from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List, Any, Literal
from datetime import date as dt_date, datetime

ConsultType = Literal["video", "chat"]
BookingStatus = Literal["upcoming", "completed", "cancelled"]
NotificationType = Literal["success", "warning", "info"]

class DoctorOut(BaseModel):
	doctor_id: str
	name: str
	specialty: str
	rating: float
	reviews: int
	experience: int
	fee: int
	avatar: str
	available: bool
	next_available: str
	education: str
	languages: List[str]
	about: str

class UserOut(BaseModel):
	user_id: str
	name: str
	email: EmailStr
	avatar: Optional[str] = None

class LoginIn(BaseModel):
	email: EmailStr
	password: str = Field(min_length=6)

class RegisterIn(LoginIn):
	name: str = Field(min_length=1)

class SessionOut(BaseModel):
	token: str
	user: UserOut

class BookingDay(BaseModel):
	date: dt_date
	day: str
	day_num: int
	month: str

class ScheduleOut(BaseModel):
	doctor: DoctorOut
	consult_type: ConsultType
	days: List[BookingDay]
	time_slots: List[str]
	steps: List[str]

class BookingIn(BaseModel):
	doctor_id: str
	date: dt_date
	time: str
	type: ConsultType = "video"
	card_number: str
	expiry: str
	cvc: str

class BookingOut(BaseModel):
	booking_id: str
	doctor_id: str
	doctor_name: str
	doctor_avatar: Optional[str] = None
	specialty: str
	date: dt_date
	time: str
	status: BookingStatus
	type: ConsultType
	fee: int

class BookingConfirmation(BaseModel):
	booking: BookingOut
	calendar_url: str

class AppointmentsOut(BaseModel):
	upcoming: List[BookingOut]
	past: List[BookingOut]

class ChatMessageOut(BaseModel):
	message_id: str
	content: str
	is_doctor: bool
	timestamp: datetime

class MessageIn(BaseModel):
	content: str

class ChatExchangeOut(BaseModel):
	message: ChatMessageOut
	reply: ChatMessageOut

class SuggestedDoctor(BaseModel):
	doctor_id: str
	name: str
	specialty: str

class ConsultationMessageOut(BaseModel):
	message_id: Optional[int] = None
	role: Literal["user", "assistant"]
	content: str
	suggested_doctors: Optional[List[SuggestedDoctor]] = None
	created_at: datetime

	class Config:
		from_attributes = True

class MedicalRecordIn(BaseModel):
	date: Optional[dt_date] = None
	conditions: List[str] = Field(default_factory=list)
	notes: Optional[str] = None

class MedicalRecordUpdate(BaseModel):
	date: Optional[dt_date] = None
	conditions: Optional[List[str]] = None
	notes: Optional[str] = None

class MedicalRecordOut(BaseModel):
	record_id: int
	date: dt_date
	condition: str
	notes: Optional[str] = None
	gemini_summary: Optional[str] = None
	synced_at: Optional[datetime] = None

	class Config:
		from_attributes = True

class PrescriptionIn(BaseModel):
	medication: str = ""
	dosage: str = ""
	start_date: Optional[dt_date] = None
	end_date: Optional[dt_date] = None
	notes: Optional[str] = None

class PrescriptionUpdate(BaseModel):
	medication: Optional[str] = None
	dosage: Optional[str] = None
	start_date: Optional[dt_date] = None
	end_date: Optional[dt_date] = None
	notes: Optional[str] = None

class PrescriptionOut(BaseModel):
	prescription_id: int
	medication: str
	dosage: str
	start_date: dt_date
	end_date: Optional[dt_date] = None
	notes: Optional[str] = None
	gemini_summary: Optional[str] = None
	synced_at: Optional[datetime] = None

	class Config:
		from_attributes = True

class DoseOut(BaseModel):
	dose_id: int
	prescription_id: int
	taken_at: datetime

	class Config:
		from_attributes = True

class SuggestionOut(BaseModel):
	summary: str

class NotificationOut(BaseModel):
	notification_id: str
	type: NotificationType
	title: str
	message: str
	timestamp: datetime

class NotificationsOut(BaseModel):
	unread_count: int
	notifications: List[NotificationOut]

class SyncRequest(BaseModel):
	type: str
	data: Optional[Any] = None
	all_records: Optional[List[Any]] = Field(default=None, alias="allRecords")
	all_prescriptions: Optional[List[Any]] = Field(default=None, alias="allPrescriptions")
	query: Optional[str] = None
	doctors: Optional[List[dict]] = None

	class Config:
		populate_by_name = True
