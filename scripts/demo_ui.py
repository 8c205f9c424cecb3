import streamlit as st
import requests

API = st.secrets.get("API", "http://localhost:8000")

st.set_page_config(page_title="HealthConnect", layout="wide")


def headers():
	token = st.session_state.get("token")
	return {"Authorization": f"Bearer {token}"} if token else {}


def call(method: str, path: str, **kwargs):
	resp = requests.request(method, f"{API}{path}", headers=headers(), timeout=60, **kwargs)
	try:
		body = resp.json()
	except ValueError:
		body = resp.text
	if resp.status_code >= 400:
		msg = body.get("error") or body.get("detail") if isinstance(body, dict) else body
		st.error(f"{resp.status_code}: {msg}")
		return None
	return body


def show_notifications():
	if not st.session_state.get("token"):
		return
	data = call("GET", "/notifications")
	if not data:
		return
	st.sidebar.caption(f"Notifications ({data['unread_count']})")
	for n in data["notifications"]:
		st.sidebar.info(f"**{n['title']}**  \n{n['message']}")


def page_auth():
	st.header("Sign in")
	mode = st.radio("Mode", ["Sign in", "Create account"], horizontal=True)
	name = st.text_input("Full Name") if mode == "Create account" else None
	email = st.text_input("Email", "you@example.com")
	password = st.text_input("Password", type="password")
	if st.button(mode):
		if mode == "Sign in":
			res = call("POST", "/auth/login", json={"email": email, "password": password})
		else:
			res = call("POST", "/auth/register", json={"name": name, "email": email, "password": password})
		if res:
			st.session_state["token"] = res["token"]
			st.session_state["user"] = res["user"]
			st.success(f"Welcome, {res['user']['name']}")
	if st.session_state.get("token") and st.button("Sign out"):
		call("POST", "/auth/logout")
		st.session_state.pop("token", None)
		st.session_state.pop("user", None)


def page_doctors():
	st.header("Find the right doctor for you")
	specialties = call("GET", "/doctors/specialties") or ["All Specialties"]
	q = st.text_input("Search doctors or specialties...")
	specialty = st.selectbox("Specialty", specialties)
	doctors = call("GET", "/doctors", params={"q": q, "specialty": specialty}) or []
	st.caption(f"{len(doctors)} doctor{'' if len(doctors) == 1 else 's'} available")
	for d in doctors:
		with st.expander(f"{d['name']} · {d['specialty']} · ${d['fee']}"):
			st.write(f"⭐ {d['rating']} ({d['reviews']} reviews) · {d['experience']} years exp.")
			st.write(d["about"])
			st.write(f"Education: {d['education']}")
			st.write(f"Languages: {', '.join(d['languages'])}")
			st.write(d["next_available"])
			if d["available"] and st.button("Book Appointment", key=f"book-{d['doctor_id']}"):
				st.session_state["book_doctor"] = d["doctor_id"]
				st.info("Open the Book page to continue")


def page_book():
	st.header("Book appointment")
	if not st.session_state.get("token"):
		st.warning("You'll need to sign in to book")
		return
	doctors = call("GET", "/doctors") or []
	ids = [d["doctor_id"] for d in doctors if d["available"]]
	names = {d["doctor_id"]: d["name"] for d in doctors}
	default = st.session_state.get("book_doctor")
	doctor_id = st.selectbox("Doctor", ids, index=ids.index(default) if default in ids else 0, format_func=lambda i: names[i])
	consult_type = st.radio("Consultation type", ["video", "chat"], horizontal=True)
	sched = call("GET", f"/bookings/{doctor_id}/schedule", params={"type": consult_type})
	if not sched:
		return
	day = st.selectbox("Select date", sched["days"], format_func=lambda d: f"{d['day']} {d['day_num']} {d['month']}")
	slot = st.selectbox("Select time", sched["time_slots"])
	st.subheader("Payment")
	card = st.text_input("Card Number", placeholder="4242 4242 4242 4242")
	c1, c2 = st.columns(2)
	expiry = c1.text_input("Expiry", placeholder="MM/YY")
	cvc = c2.text_input("CVC", placeholder="123")
	if st.button(f"Pay ${sched['doctor']['fee']}"):
		payload = {"doctor_id": doctor_id, "date": day["date"], "time": slot, "type": consult_type, "card_number": card, "expiry": expiry, "cvc": cvc}
		with st.spinner("Processing payment..."):
			res = call("POST", "/bookings", json=payload)
		if res:
			st.success("Booking confirmed!")
			st.link_button("Add to Google Calendar", res["calendar_url"])


def page_appointments():
	st.header("My appointments")
	data = call("GET", "/appointments")
	if not data:
		return
	if not data["upcoming"] and not data["past"]:
		st.info("Find a doctor and book your first consultation")
	for section in ("upcoming", "past"):
		if data[section]:
			st.subheader(section.title())
		for b in data[section]:
			cols = st.columns([4, 1, 1])
			cols[0].write(f"**{b['doctor_name']}** · {b['specialty']} · {b['date']} {b['time']} · {b['type']} · {b['status']}")
			if b["status"] == "upcoming" and cols[1].button("Cancel", key=f"cancel-{b['booking_id']}"):
				call("POST", f"/appointments/{b['booking_id']}/cancel")
				st.rerun()
			if cols[2].button("Remove", key=f"rm-{b['booking_id']}"):
				call("DELETE", f"/appointments/{b['booking_id']}")
				st.rerun()


def page_chat():
	st.header("Chat with your doctor")
	doctors = call("GET", "/doctors") or []
	names = {d["doctor_id"]: d["name"] for d in doctors}
	doctor_id = st.selectbox("Doctor", list(names), format_func=lambda i: names[i])
	text = st.chat_input("Type a message...")
	if text:
		with st.spinner("Doctor is typing..."):
			call("POST", f"/chat/{doctor_id}/messages", json={"content": text})
	for m in call("GET", f"/chat/{doctor_id}") or []:
		with st.chat_message("assistant" if m["is_doctor"] else "user"):
			st.write(m["content"])


def page_consultation():
	st.header("Health Consultation")
	if st.button("New Chat"):
		call("DELETE", "/consultation")
	text = st.chat_input("Describe your symptoms...")
	if text:
		with st.spinner("Thinking..."):
			call("POST", "/consultation/messages", json={"content": text})
	for m in call("GET", "/consultation") or []:
		with st.chat_message(m["role"]):
			st.write(m["content"])
			for d in m.get("suggested_doctors") or []:
				st.caption(f"👩‍⚕️ {d['name']} ({d['specialty']})")


def page_medical():
	st.header("Medical history")
	with st.form("record"):
		when = st.date_input("Date")
		conditions = st.text_input("Conditions (comma separated)", placeholder="e.g. Asthma, Diabetes")
		notes = st.text_area("Notes")
		if st.form_submit_button("Add Record"):
			if call("POST", "/medical/records", json={"date": when.isoformat(), "conditions": conditions.split(","), "notes": notes}):
				st.success("Record added")
	for r in call("GET", "/medical/records") or []:
		with st.container(border=True):
			st.write(f"**{r['date']}** · {r['condition']}")
			if r["notes"]:
				st.caption(r["notes"])
			if r["gemini_summary"]:
				st.markdown(r["gemini_summary"])
			c1, c2, c3 = st.columns(3)
			if c1.button("Sync", key=f"sync-r{r['record_id']}"):
				call("POST", f"/medical/records/{r['record_id']}/sync")
				st.rerun()
			if c2.button("AI Suggestions", key=f"sug-r{r['record_id']}"):
				res = call("POST", f"/medical/records/{r['record_id']}/suggestions")
				if res:
					st.markdown(res["summary"])
			if c3.button("Delete", key=f"del-r{r['record_id']}"):
				call("DELETE", f"/medical/records/{r['record_id']}")
				st.rerun()


def page_prescriptions():
	st.header("Prescriptions")
	with st.form("rx"):
		c1, c2 = st.columns(2)
		medication = c1.text_input("Medication")
		dosage = c2.text_input("Dosage")
		start = c1.date_input("Start date")
		end = c2.date_input("End date", value=None)
		notes = st.text_area("Notes")
		if st.form_submit_button("Add Prescription"):
			payload = {"medication": medication, "dosage": dosage, "start_date": start.isoformat(), "end_date": end.isoformat() if end else None, "notes": notes}
			if call("POST", "/prescriptions", json=payload):
				st.success("Prescription added")
	for p in call("GET", "/prescriptions") or []:
		pid = p["prescription_id"]
		with st.container(border=True):
			st.write(f"💊 **{p['medication']}** · {p['dosage']} · from {p['start_date']}" + (f" to {p['end_date']}" if p["end_date"] else ""))
			if p["gemini_summary"]:
				st.markdown(p["gemini_summary"])
			taken = call("GET", f"/prescriptions/{pid}/taken") or []
			if taken:
				st.caption(f"Taken {len(taken)} time(s), last at {taken[-1]['taken_at']}")
			c1, c2, c3, c4 = st.columns(4)
			if c1.button("Mark taken", key=f"take-{pid}"):
				call("POST", f"/prescriptions/{pid}/taken")
				st.rerun()
			if c2.button("Sync", key=f"sync-p{pid}"):
				call("POST", f"/prescriptions/{pid}/sync")
				st.rerun()
			if c3.button("AI Suggestions", key=f"sug-p{pid}"):
				res = call("POST", f"/prescriptions/{pid}/suggestions")
				if res:
					st.markdown(res["summary"])
			if c4.button("Delete", key=f"del-p{pid}"):
				call("DELETE", f"/prescriptions/{pid}")
				st.rerun()


PAGES = {
	"Doctors": page_doctors,
	"Sign in": page_auth,
	"Book": page_book,
	"Appointments": page_appointments,
	"Chat": page_chat,
	"Consultation": page_consultation,
	"Medical": page_medical,
	"Prescriptions": page_prescriptions,
}

st.sidebar.title("HealthConnect")
user = st.session_state.get("user")
st.sidebar.write(f"Signed in as {user['name']}" if user else "Not signed in")
choice = st.sidebar.radio("Go to", list(PAGES))
show_notifications()
if choice not in ("Doctors", "Sign in") and not st.session_state.get("token"):
	st.warning("Please sign in first")
	page_auth()
else:
	PAGES[choice]()
