def test_imports():
	import healthconnect.main  # noqa: F401
	import healthconnect.models  # noqa: F401
	import healthconnect.routers.doctors  # noqa: F401
	import healthconnect.routers.bookings  # noqa: F401
	import healthconnect.routers.appointments  # noqa: F401
	import healthconnect.routers.medical  # noqa: F401
	import healthconnect.routers.prescriptions  # noqa: F401
	import healthconnect.routers.ai  # noqa: F401


def test_root(client):
	res = client.get("/")
	assert res.status_code == 200
	assert res.json()["status"] == "ok"


def test_seed_runs(client):
	from scripts.seed import seed, DEMO_EMAIL
	seed()
	seed()
	res = client.post("/auth/login", json={"email": DEMO_EMAIL, "password": "secret1"})
	headers = {"Authorization": f"Bearer {res.json()['token']}"}
	records = client.get("/medical/records", headers=headers).json()
	assert len(records) == 2
	assert len(client.get("/prescriptions", headers=headers).json()) == 2
