from healthconnect.db import SessionLocal, Base, engine
from healthconnect import models
from healthconnect.services.auth import user_id_for
from datetime import date, timedelta

Base.metadata.create_all(bind=engine)

DEMO_EMAIL = "demo@example.com"

def upsert_record(db, owner_id: str, when: date, condition: str, notes: str | None = None):
	r = db.query(models.MedicalRecord).filter(
		models.MedicalRecord.owner_id == owner_id,
		models.MedicalRecord.condition == condition,
	).first()
	if not r:
		r = models.MedicalRecord(owner_id=owner_id, date=when, condition=condition, notes=notes)
		db.add(r); db.commit(); db.refresh(r)
	return r

def upsert_prescription(db, owner_id: str, medication: str, dosage: str, start: date, end: date | None = None, notes: str | None = None):
	p = db.query(models.Prescription).filter(
		models.Prescription.owner_id == owner_id,
		models.Prescription.medication == medication,
	).first()
	if not p:
		p = models.Prescription(owner_id=owner_id, medication=medication, dosage=dosage, start_date=start, end_date=end, notes=notes)
		db.add(p); db.commit(); db.refresh(p)
	return p

def seed(email: str = DEMO_EMAIL) -> str:
	db = SessionLocal()
	owner_id = user_id_for(email)
	today = date.today()
	upsert_record(db, owner_id, today - timedelta(days=400), "Asthma", "Mild, exercise induced")
	upsert_record(db, owner_id, today - timedelta(days=30), "Hypertension, High cholesterol", "BP 145/92 at last check")
	upsert_prescription(db, owner_id, "Albuterol", "2 puffs as needed", today - timedelta(days=400), notes="Before exercise")
	upsert_prescription(db, owner_id, "Lisinopril", "10mg once daily", today - timedelta(days=30), today + timedelta(days=60))
	db.close()
	return owner_id

if __name__ == "__main__":
	seed()
	print(f"Seeded sample data for {DEMO_EMAIL}.")
