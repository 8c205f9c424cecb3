from sqlalchemy import Column, Integer, String, Date, Text, ForeignKey, DateTime, JSON, func
from sqlalchemy.orm import relationship
from healthconnect.db import Base

class MedicalRecord(Base):
	__tablename__ = "medical_records"
	record_id = Column(Integer, primary_key=True)
	owner_id = Column(String, nullable=False, index=True)
	date = Column(Date, nullable=False)
	condition = Column(Text, nullable=False)
	notes = Column(Text)
	gemini_summary = Column(Text)
	synced_at = Column(DateTime)
	created_at = Column(DateTime, server_default=func.now())

class Prescription(Base):
	__tablename__ = "prescriptions"
	prescription_id = Column(Integer, primary_key=True)
	owner_id = Column(String, nullable=False, index=True)
	medication = Column(String, nullable=False)
	dosage = Column(String, nullable=False)
	start_date = Column(Date, nullable=False)
	end_date = Column(Date)
	notes = Column(Text)
	gemini_summary = Column(Text)
	synced_at = Column(DateTime)
	created_at = Column(DateTime, server_default=func.now())

	doses = relationship("DoseLog", back_populates="prescription", cascade="all, delete-orphan", order_by="DoseLog.taken_at")

class DoseLog(Base):
	__tablename__ = "dose_logs"
	dose_id = Column(Integer, primary_key=True)
	prescription_id = Column(Integer, ForeignKey("prescriptions.prescription_id"), nullable=False)
	taken_at = Column(DateTime, nullable=False)

	prescription = relationship("Prescription", back_populates="doses")

class ConsultationMessage(Base):
	__tablename__ = "consultation_messages"
	message_id = Column(Integer, primary_key=True)
	owner_id = Column(String, nullable=False, index=True)
	role = Column(String, nullable=False)
	content = Column(Text, nullable=False)
	suggested_doctors = Column(JSON)
	created_at = Column(DateTime, nullable=False)
