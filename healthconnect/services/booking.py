import asyncio
from datetime import date, datetime, timedelta
from typing import List, Tuple
from zoneinfo import ZoneInfo
from healthconnect.config import settings
from healthconnect.schemas import BookingDay, BookingOut, DoctorOut
from healthconnect.services.payment import validate_payment
from healthconnect.store import store
from healthconnect.logger import get_logger

log = get_logger("booking")

TIME_SLOTS = [
	"9:00 AM",
	"10:00 AM",
	"11:00 AM",
	"2:00 PM",
	"3:00 PM",
	"4:00 PM",
	"5:00 PM",
]
STEPS = ["schedule", "payment", "confirmation"]
APPOINTMENT_MINUTES = 30


class PaymentDeclined(ValueError):
	def __init__(self, errors: dict):
		super().__init__("Payment details are invalid")
		self.errors = errors


def local_today() -> date:
	return datetime.now(ZoneInfo(settings.timezone)).date()


def booking_days(today: date | None = None, count: int | None = None) -> List[BookingDay]:
	start = today or local_today()
	n = count if count is not None else settings.booking_window_days
	days = []
	for i in range(n):
		d = start + timedelta(days=i)
		days.append(BookingDay(date=d, day=d.strftime("%a"), day_num=d.day, month=d.strftime("%b")))
	return days


def parse_slot(time_label: str) -> Tuple[int, int]:
	t = datetime.strptime(time_label.strip().upper(), "%I:%M %p")
	return t.hour, t.minute


def check_selection(doctor: DoctorOut, day: date, time_label: str, today: date | None = None) -> None:
	if not doctor.available:
		raise ValueError(f"{doctor.name} is not available for booking")
	window = {d.date for d in booking_days(today)}
	if day not in window:
		raise ValueError(f"Date must be within the next {settings.booking_window_days} days")
	if time_label not in TIME_SLOTS:
		raise ValueError(f"Unknown time slot: {time_label}")


async def book(user_id: str, doctor: DoctorOut, day: date, time_label: str, consult_type: str, card_number: str, expiry: str, cvc: str, today: date | None = None) -> BookingOut:
	"""Run the schedule and payment steps and return the confirmed booking.

	Raises ValueError for a bad selection and PaymentDeclined (a ValueError)
	carrying per-field messages when the card details fail validation.
	"""
	check_selection(doctor, day, time_label, today)
	errors = validate_payment(card_number, expiry, cvc)
	if errors:
		raise PaymentDeclined(errors)

	# mock payment processing
	await asyncio.sleep(settings.payment_delay_seconds)

	booking = store.add_booking(
		user_id,
		doctor_id=doctor.doctor_id,
		doctor_name=doctor.name,
		doctor_avatar=doctor.avatar,
		specialty=doctor.specialty,
		date=day,
		time=time_label,
		status="upcoming",
		type=consult_type,
		fee=doctor.fee,
	)
	log.info("Booked %s with %s on %s at %s", booking.type, doctor.name, day.isoformat(), time_label)
	return booking


def split_appointments(bookings: List[BookingOut]) -> Tuple[List[BookingOut], List[BookingOut]]:
	upcoming = [b for b in bookings if b.status == "upcoming"]
	past = [b for b in bookings if b.status in ("completed", "cancelled")]
	return upcoming, past
