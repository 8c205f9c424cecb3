from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from healthconnect.schemas import AppointmentsOut, BookingOut, UserOut
from healthconnect.services.auth import current_user
from healthconnect.services.booking import split_appointments
from healthconnect.services.calendar_files import create_ics, google_calendar_url
from healthconnect.store import store

router = APIRouter(prefix="/appointments", tags=["appointments"])


def _booking_or_404(user: UserOut, booking_id: str) -> BookingOut:
	b = store.get_booking(user.user_id, booking_id)
	if not b:
		raise HTTPException(status_code=404, detail="Booking not found")
	return b

@router.get("", response_model=AppointmentsOut)
def list_appointments(user: UserOut = Depends(current_user)):
	upcoming, past = split_appointments(store.list_bookings(user.user_id))
	return AppointmentsOut(upcoming=upcoming, past=past)

@router.post("/{booking_id}/cancel", response_model=BookingOut)
def cancel(booking_id: str, user: UserOut = Depends(current_user)):
	_booking_or_404(user, booking_id)
	return store.update_booking(user.user_id, booking_id, status="cancelled")

@router.delete("/{booking_id}")
def remove(booking_id: str, user: UserOut = Depends(current_user)):
	if not store.remove_booking(user.user_id, booking_id):
		raise HTTPException(status_code=404, detail="Booking not found")
	return {"booking_id": booking_id, "removed": True}

@router.get("/{booking_id}/calendar")
def calendar_link(booking_id: str, user: UserOut = Depends(current_user)):
	b = _booking_or_404(user, booking_id)
	return {"booking_id": booking_id, "url": google_calendar_url(b)}

@router.get("/{booking_id}.ics")
def export_ics(booking_id: str, user: UserOut = Depends(current_user)):
	b = _booking_or_404(user, booking_id)
	return PlainTextResponse(content=create_ics(b), media_type="text/calendar")
