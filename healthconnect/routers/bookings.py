from fastapi import APIRouter, Depends, HTTPException
from healthconnect import directory
from healthconnect.integrations.notifications import push_notification
from healthconnect.schemas import BookingIn, BookingConfirmation, ConsultType, ScheduleOut, UserOut
from healthconnect.services.auth import current_user
from healthconnect.services.booking import STEPS, TIME_SLOTS, PaymentDeclined, book, booking_days
from healthconnect.services.calendar_files import google_calendar_url

router = APIRouter(prefix="/bookings", tags=["bookings"])


def _doctor_or_404(doctor_id: str):
	d = directory.get_doctor(doctor_id)
	if not d:
		raise HTTPException(status_code=404, detail="Doctor not found")
	return d

@router.get("/{doctor_id}/schedule", response_model=ScheduleOut)
def schedule(doctor_id: str, type: ConsultType = "video", user: UserOut = Depends(current_user)):
	d = _doctor_or_404(doctor_id)
	return ScheduleOut(doctor=d, consult_type=type, days=booking_days(), time_slots=TIME_SLOTS, steps=STEPS)

@router.post("", response_model=BookingConfirmation)
async def create_booking(payload: BookingIn, user: UserOut = Depends(current_user)):
	d = _doctor_or_404(payload.doctor_id)
	try:
		booking = await book(user.user_id, d, payload.date, payload.time, payload.type, payload.card_number, payload.expiry, payload.cvc)
	except PaymentDeclined as pd:
		raise HTTPException(status_code=400, detail={"message": str(pd), "errors": pd.errors})
	except ValueError as ve:
		raise HTTPException(status_code=400, detail=str(ve))
	push_notification(user.user_id, "success", "Appointment Booked", f"{booking.doctor_name} on {booking.date.isoformat()} at {booking.time}")
	return BookingConfirmation(booking=booking, calendar_url=google_calendar_url(booking))
