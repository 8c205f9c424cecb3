from datetime import datetime, timedelta, timezone
from urllib.parse import urlencode
from zoneinfo import ZoneInfo
from healthconnect.config import settings
from healthconnect.schemas import BookingOut
from healthconnect.services.booking import APPOINTMENT_MINUTES, parse_slot

GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"


def booking_window(booking: BookingOut) -> tuple[datetime, datetime]:
	hour, minute = parse_slot(booking.time)
	local = datetime(booking.date.year, booking.date.month, booking.date.day, hour, minute, tzinfo=ZoneInfo(settings.timezone))
	start = local.astimezone(timezone.utc)
	return start, start + timedelta(minutes=APPOINTMENT_MINUTES)


def _stamp(dt: datetime) -> str:
	return dt.strftime("%Y%m%dT%H%M%SZ")


def _describe(booking: BookingOut) -> tuple[str, str, str]:
	if booking.type == "video":
		short, mode, location = "Video", "Video Call", "Video Call - HealthConnect"
	else:
		short, mode, location = "Chat", "Chat", "Chat - HealthConnect"
	title = f"{short} Consultation with {booking.doctor_name}"
	details = f"{booking.specialty} consultation via HealthConnect.\n\nType: {mode}\nDoctor: {booking.doctor_name}"
	return title, details, location


def google_calendar_url(booking: BookingOut) -> str:
	title, details, location = _describe(booking)
	start, end = booking_window(booking)
	params = {
		"action": "TEMPLATE",
		"text": title,
		"dates": f"{_stamp(start)}/{_stamp(end)}",
		"details": details,
		"location": location,
	}
	return f"{GOOGLE_CALENDAR_URL}?{urlencode(params)}"


def _escape(text: str) -> str:
	return text.replace("\\", "\\\\").replace(";", "\\;").replace(",", "\\,").replace("\n", "\\n")


def create_ics(booking: BookingOut) -> str:
	title, details, location = _describe(booking)
	start, end = booking_window(booking)
	lines = [
		"BEGIN:VCALENDAR",
		"VERSION:2.0",
		"PRODID:-//HealthConnect//Appointments//EN",
		"BEGIN:VEVENT",
		f"UID:{booking.booking_id}@healthconnect.local",
		f"DTSTAMP:{_stamp(datetime.now(timezone.utc))}",
		f"DTSTART:{_stamp(start)}",
		f"DTEND:{_stamp(end)}",
		f"SUMMARY:{_escape(title)}",
		f"DESCRIPTION:{_escape(details)}",
		f"LOCATION:{_escape(location)}",
		"END:VEVENT",
		"END:VCALENDAR",
	]
	return "\r\n".join(lines) + "\r\n"
