"""Static doctor directory used for search, filtering and profile pages."""
from typing import List, Optional
from healthconnect.schemas import DoctorOut

ALL_SPECIALTIES = "All Specialties"

_DOCTORS = [
	{
		"doctor_id": "1",
		"name": "Dr. Sarah Chen",
		"specialty": "Cardiology",
		"rating": 4.9,
		"reviews": 324,
		"experience": 15,
		"fee": 150,
		"avatar": "/doctors/sarah-chen.jpg",
		"available": True,
		"next_available": "Available today",
		"education": "MD, Johns Hopkins University",
		"languages": ["English", "Mandarin"],
		"about": "Board-certified cardiologist focused on preventive heart care, hypertension and arrhythmia management.",
	},
	{
		"doctor_id": "2",
		"name": "Dr. Michael Rivera",
		"specialty": "Dermatology",
		"rating": 4.8,
		"reviews": 256,
		"experience": 12,
		"fee": 120,
		"avatar": "/doctors/michael-rivera.jpg",
		"available": True,
		"next_available": "Available today",
		"education": "MD, Stanford University",
		"languages": ["English", "Spanish"],
		"about": "Treats acne, eczema, psoriasis and skin allergies, and performs skin cancer screenings.",
	},
	{
		"doctor_id": "3",
		"name": "Dr. Emily Watson",
		"specialty": "Pediatrics",
		"rating": 4.9,
		"reviews": 412,
		"experience": 10,
		"fee": 100,
		"avatar": "/doctors/emily-watson.jpg",
		"available": True,
		"next_available": "Available tomorrow",
		"education": "MD, University of Pennsylvania",
		"languages": ["English"],
		"about": "Cares for infants, children and teens, from routine checkups and vaccinations to fevers and childhood asthma.",
	},
	{
		"doctor_id": "4",
		"name": "Dr. James Okafor",
		"specialty": "Neurology",
		"rating": 4.7,
		"reviews": 189,
		"experience": 18,
		"fee": 180,
		"avatar": "/doctors/james-okafor.jpg",
		"available": False,
		"next_available": "Next available in 3 days",
		"education": "MD, Harvard Medical School",
		"languages": ["English", "French"],
		"about": "Specialises in migraines, headaches, epilepsy, dizziness and nerve pain.",
	},
	{
		"doctor_id": "5",
		"name": "Dr. Priya Sharma",
		"specialty": "General Practice",
		"rating": 4.8,
		"reviews": 538,
		"experience": 8,
		"fee": 80,
		"avatar": "/doctors/priya-sharma.jpg",
		"available": True,
		"next_available": "Available today",
		"education": "MBBS, All India Institute of Medical Sciences",
		"languages": ["English", "Hindi"],
		"about": "Family physician for colds, flu, infections, fatigue and general health concerns, and coordinates specialist referrals.",
	},
	{
		"doctor_id": "6",
		"name": "Dr. Anna Kowalski",
		"specialty": "Psychiatry",
		"rating": 4.9,
		"reviews": 201,
		"experience": 14,
		"fee": 160,
		"avatar": "/doctors/anna-kowalski.jpg",
		"available": True,
		"next_available": "Available tomorrow",
		"education": "MD, Columbia University",
		"languages": ["English", "Polish"],
		"about": "Supports patients with anxiety, depression, insomnia and stress through therapy and medication management.",
	},
	{
		"doctor_id": "7",
		"name": "Dr. David Kim",
		"specialty": "Orthopedics",
		"rating": 4.6,
		"reviews": 167,
		"experience": 20,
		"fee": 170,
		"avatar": "/doctors/david-kim.jpg",
		"available": True,
		"next_available": "Available today",
		"education": "MD, University of California, San Francisco",
		"languages": ["English", "Korean"],
		"about": "Treats joint pain, back pain, sports injuries and fractures, with a focus on non-surgical recovery.",
	},
	{
		"doctor_id": "8",
		"name": "Dr. Laura Martins",
		"specialty": "Endocrinology",
		"rating": 4.7,
		"reviews": 143,
		"experience": 11,
		"fee": 140,
		"avatar": "/doctors/laura-martins.jpg",
		"available": False,
		"next_available": "Next available in 5 days",
		"education": "MD, Duke University",
		"languages": ["English", "Portuguese"],
		"about": "Manages diabetes, thyroid disorders and hormonal imbalances.",
	},
]

DOCTORS: List[DoctorOut] = [DoctorOut(**d) for d in _DOCTORS]


def all_doctors() -> List[DoctorOut]:
	return list(DOCTORS)


def get_doctor(doctor_id: str) -> Optional[DoctorOut]:
	for d in DOCTORS:
		if d.doctor_id == doctor_id:
			return d
	return None


def specialties() -> List[str]:
	seen = []
	for d in DOCTORS:
		if d.specialty not in seen:
			seen.append(d.specialty)
	return [ALL_SPECIALTIES] + seen


def filter_doctors(query: str | None = None, specialty: str | None = None) -> List[DoctorOut]:
	"""Match the search text against name or specialty, then narrow by specialty.

	The text match is a case-insensitive substring test; the specialty must
	match exactly unless it is empty or "All Specialties".
	"""
	q = (query or "").lower()
	out = []
	for d in DOCTORS:
		matches_search = q in d.name.lower() or q in d.specialty.lower()
		matches_specialty = not specialty or specialty == ALL_SPECIALTIES or d.specialty == specialty
		if matches_search and matches_specialty:
			out.append(d)
	return out
