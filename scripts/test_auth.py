from healthconnect.services.auth import user_id_for


def test_login_uses_email_local_part_as_name(client):
	res = client.post("/auth/login", json={"email": "jane.doe@example.com", "password": "secret1"})
	assert res.status_code == 200
	body = res.json()
	assert body["token"]
	assert body["user"]["name"] == "jane.doe"
	assert body["user"]["user_id"] == user_id_for("jane.doe@example.com")


def test_register_keeps_name(client):
	res = client.post("/auth/register", json={"name": "Jane Doe", "email": "jane@example.com", "password": "secret1"})
	assert res.status_code == 200
	headers = {"Authorization": f"Bearer {res.json()['token']}"}
	me = client.get("/auth/me", headers=headers).json()
	assert me["name"] == "Jane Doe"
	assert me["email"] == "jane@example.com"


def test_user_id_is_stable_per_email():
	assert user_id_for("A@Example.com ") == user_id_for("a@example.com")
	assert user_id_for("a@example.com") != user_id_for("b@example.com")


def test_form_validation(client):
	assert client.post("/auth/login", json={"email": "not-an-email", "password": "secret1"}).status_code == 422
	assert client.post("/auth/login", json={"email": "a@example.com", "password": "123"}).status_code == 422
	assert client.post("/auth/register", json={"name": "", "email": "a@example.com", "password": "secret1"}).status_code == 422


def test_logout_ends_session(client, auth_headers):
	assert client.get("/auth/me", headers=auth_headers).status_code == 200
	assert client.post("/auth/logout", headers=auth_headers).json() == {"logged_out": True}
	assert client.get("/auth/me", headers=auth_headers).status_code == 401
	assert client.post("/auth/logout").json() == {"logged_out": False}


def test_protected_pages_need_a_token(client):
	for path in ("/appointments", "/chat/1", "/consultation", "/medical/records", "/prescriptions", "/notifications"):
		res = client.get(path)
		assert res.status_code == 401, path
		assert res.json()["detail"] == "Not authenticated"
	assert client.get("/appointments", headers={"Authorization": "Bearer nope"}).status_code == 401
	assert client.get("/appointments", headers={"Authorization": "Basic abc"}).status_code == 401
