from datetime import date, timedelta
from urllib.parse import urlparse, parse_qs
import pytest
from healthconnect import directory
from healthconnect.schemas import BookingOut
from healthconnect.services.booking import TIME_SLOTS, booking_days, check_selection, local_today, parse_slot, split_appointments
from healthconnect.services.calendar_files import create_ics, google_calendar_url

CARD = {"card_number": "4242 4242 4242 4242", "expiry": "12/30", "cvc": "123"}


def _booking(**overrides) -> BookingOut:
	fields = dict(
		booking_id="b1", doctor_id="1", doctor_name="Dr. Sarah Chen", specialty="Cardiology",
		date=date(2026, 10, 20), time="9:00 AM", status="upcoming", type="video", fee=150,
	)
	fields.update(overrides)
	return BookingOut(**fields)


def test_booking_days_cover_a_week_from_today():
	days = booking_days(date(2026, 10, 17))
	assert len(days) == 7
	assert days[0].date == date(2026, 10, 17)
	assert days[0].day == "Sat"
	assert days[0].month == "Oct"
	assert days[-1].date == date(2026, 10, 23)
	assert days[-1].day_num == 23


def test_booking_window_starts_on_configured_zone_date(monkeypatch):
	from healthconnect.config import settings
	monkeypatch.setattr(settings, "timezone", "Pacific/Kiritimati")
	ahead = booking_days()[0].date
	monkeypatch.setattr(settings, "timezone", "Pacific/Pago_Pago")
	behind = booking_days()[0].date
	# 25 hours apart, so the local dates never coincide
	assert ahead > behind
	assert behind == local_today()


def test_parse_slot():
	assert parse_slot("9:00 AM") == (9, 0)
	assert parse_slot("2:00 PM") == (14, 0)
	assert [parse_slot(t)[0] for t in TIME_SLOTS] == [9, 10, 11, 14, 15, 16, 17]


def test_check_selection_rejects_bad_choices():
	today = date(2026, 10, 17)
	doctor = directory.get_doctor("1")
	check_selection(doctor, today, "9:00 AM", today)
	with pytest.raises(ValueError):
		check_selection(doctor, today + timedelta(days=7), "9:00 AM", today)
	with pytest.raises(ValueError):
		check_selection(doctor, today - timedelta(days=1), "9:00 AM", today)
	with pytest.raises(ValueError):
		check_selection(doctor, today, "8:00 AM", today)
	with pytest.raises(ValueError):
		check_selection(directory.get_doctor("4"), today, "9:00 AM", today)


def test_google_calendar_url():
	url = google_calendar_url(_booking())
	parsed = urlparse(url)
	assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == "https://calendar.google.com/calendar/render"
	qs = parse_qs(parsed.query)
	assert qs["action"] == ["TEMPLATE"]
	assert qs["text"] == ["Video Consultation with Dr. Sarah Chen"]
	assert qs["dates"] == ["20261020T090000Z/20261020T093000Z"]
	assert qs["details"] == ["Cardiology consultation via HealthConnect.\n\nType: Video Call\nDoctor: Dr. Sarah Chen"]
	assert qs["location"] == ["Video Call - HealthConnect"]


def test_google_calendar_url_for_chat():
	qs = parse_qs(urlparse(google_calendar_url(_booking(type="chat", time="2:00 PM"))).query)
	assert qs["text"] == ["Chat Consultation with Dr. Sarah Chen"]
	assert qs["dates"] == ["20261020T140000Z/20261020T143000Z"]
	assert qs["location"] == ["Chat - HealthConnect"]


def test_create_ics():
	ics = create_ics(_booking())
	assert "BEGIN:VEVENT" in ics
	assert "DTSTART:20261020T090000Z" in ics
	assert "DTEND:20261020T093000Z" in ics
	assert "SUMMARY:Video Consultation with Dr. Sarah Chen" in ics
	assert ics.endswith("END:VCALENDAR\r\n")


def test_split_appointments():
	rows = [_booking(booking_id="a"), _booking(booking_id="b", status="cancelled"), _booking(booking_id="c", status="completed")]
	upcoming, past = split_appointments(rows)
	assert [b.booking_id for b in upcoming] == ["a"]
	assert [b.booking_id for b in past] == ["b", "c"]


def test_booking_requires_login(client):
	res = client.post("/bookings", json={"doctor_id": "1", "date": local_today().isoformat(), "time": "9:00 AM", **CARD})
	assert res.status_code == 401
	assert client.get("/bookings/1/schedule").status_code == 401


def test_schedule(client, auth_headers):
	res = client.get("/bookings/1/schedule", params={"type": "chat"}, headers=auth_headers)
	assert res.status_code == 200
	body = res.json()
	assert body["consult_type"] == "chat"
	assert body["time_slots"] == TIME_SLOTS
	assert body["steps"] == ["schedule", "payment", "confirmation"]
	assert body["days"][0]["date"] == local_today().isoformat()
	assert client.get("/bookings/1/schedule", headers=auth_headers).json()["consult_type"] == "video"


def test_book_and_manage_appointment(client, auth_headers):
	payload = {"doctor_id": "1", "date": local_today().isoformat(), "time": "10:00 AM", "type": "chat", **CARD}
	res = client.post("/bookings", json=payload, headers=auth_headers)
	assert res.status_code == 200, res.text
	body = res.json()
	booking = body["booking"]
	assert booking["status"] == "upcoming"
	assert booking["fee"] == 150
	assert booking["doctor_name"] == "Dr. Sarah Chen"
	assert booking["type"] == "chat"
	assert body["calendar_url"].startswith("https://calendar.google.com/calendar/render?action=TEMPLATE")

	listing = client.get("/appointments", headers=auth_headers).json()
	assert [b["booking_id"] for b in listing["upcoming"]] == [booking["booking_id"]]
	assert listing["past"] == []

	bid = booking["booking_id"]
	assert client.get(f"/appointments/{bid}/calendar", headers=auth_headers).json()["url"] == body["calendar_url"]
	ics = client.get(f"/appointments/{bid}.ics", headers=auth_headers)
	assert ics.status_code == 200
	assert ics.headers["content-type"].startswith("text/calendar")

	cancelled = client.post(f"/appointments/{bid}/cancel", headers=auth_headers).json()
	assert cancelled["status"] == "cancelled"
	listing = client.get("/appointments", headers=auth_headers).json()
	assert listing["upcoming"] == []
	assert listing["past"][0]["status"] == "cancelled"

	assert client.delete(f"/appointments/{bid}", headers=auth_headers).status_code == 200
	assert client.delete(f"/appointments/{bid}", headers=auth_headers).status_code == 404
	assert client.post(f"/appointments/{bid}/cancel", headers=auth_headers).status_code == 404


def test_booking_pushes_notification(client, auth_headers):
	payload = {"doctor_id": "2", "date": local_today().isoformat(), "time": "9:00 AM", **CARD}
	client.post("/bookings", json=payload, headers=auth_headers)
	notes = client.get("/notifications", headers=auth_headers).json()
	assert notes["unread_count"] == 1
	assert notes["notifications"][0]["title"] == "Appointment Booked"


def test_bookings_are_per_user(client, login):
	first, second = login(), login()
	payload = {"doctor_id": "1", "date": local_today().isoformat(), "time": "9:00 AM", **CARD}
	client.post("/bookings", json=payload, headers=first)
	assert len(client.get("/appointments", headers=first).json()["upcoming"]) == 1
	assert client.get("/appointments", headers=second).json()["upcoming"] == []


def test_invalid_payment_lists_field_errors(client, auth_headers):
	payload = {"doctor_id": "1", "date": local_today().isoformat(), "time": "9:00 AM", "card_number": "4242", "expiry": "13/30", "cvc": "1"}
	res = client.post("/bookings", json=payload, headers=auth_headers)
	assert res.status_code == 400
	errors = res.json()["detail"]["errors"]
	assert set(errors) == {"card", "expiry", "cvc"}
	assert client.get("/appointments", headers=auth_headers).json()["upcoming"] == []


def test_booking_rejects_bad_selection(client, auth_headers):
	base = {"doctor_id": "1", "date": local_today().isoformat(), "time": "9:00 AM", **CARD}
	assert client.post("/bookings", json={**base, "doctor_id": "999"}, headers=auth_headers).status_code == 404
	assert client.post("/bookings", json={**base, "doctor_id": "4"}, headers=auth_headers).status_code == 400
	late = (local_today() + timedelta(days=30)).isoformat()
	assert client.post("/bookings", json={**base, "date": late}, headers=auth_headers).status_code == 400
	assert client.post("/bookings", json={**base, "time": "7:00 AM"}, headers=auth_headers).status_code == 400
	assert client.post("/bookings", json={**base, "type": "phone"}, headers=auth_headers).status_code == 422
