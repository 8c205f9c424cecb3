import os
import tempfile
from uuid import uuid4

_TMP = tempfile.mkdtemp(prefix="healthconnect-test-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP, 'test.db')}"
os.environ["GEMINI_API_KEY"] = "test-key"
for _name in ("AUTH_DELAY_SECONDS", "PAYMENT_DELAY_SECONDS", "CHAT_REPLY_DELAY_SECONDS", "CHAT_REPLY_JITTER_SECONDS"):
	os.environ[_name] = "0"

import pytest
import requests
from fastapi.testclient import TestClient


@pytest.fixture
def client():
	from healthconnect.main import app
	from healthconnect.store import store
	store.reset()
	return TestClient(app)


@pytest.fixture
def login(client):
	def _login(email: str | None = None):
		email = email or f"{uuid4().hex[:8]}@example.com"
		res = client.post("/auth/login", json={"email": email, "password": "secret1"})
		assert res.status_code == 200, res.text
		return {"Authorization": f"Bearer {res.json()['token']}"}
	return _login


@pytest.fixture
def auth_headers(login):
	return login()


class FakeResponse:
	def __init__(self, status_code: int, body=None, text: str = ""):
		self.status_code = status_code
		self._body = body
		self.text = text

	@property
	def ok(self):
		return 200 <= self.status_code < 300

	def json(self):
		if self._body is None:
			raise ValueError("no json")
		return self._body


class GeminiStub:
	def __init__(self):
		self.calls = []
		self.response = None
		self.error = None
		self.reply("• point one\n• point two\n• point three")

	def reply(self, text: str):
		body = {"candidates": [{"content": {"parts": [{"text": text}]}}]}
		self.response = FakeResponse(200, body, text="ok")
		self.error = None

	def fail(self, status_code: int, text: str):
		self.response = FakeResponse(status_code, None, text=text)
		self.error = None

	def raise_error(self, exc: Exception):
		self.error = exc

	@property
	def last_prompt(self) -> str:
		return self.calls[-1]["json"]["contents"][0]["parts"][0]["text"]

	def post(self, url, params=None, headers=None, json=None, timeout=None):
		self.calls.append({"url": url, "params": params, "headers": headers, "json": json, "timeout": timeout})
		if self.error:
			raise self.error
		return self.response


@pytest.fixture
def gemini(monkeypatch):
	stub = GeminiStub()
	monkeypatch.setattr(requests, "post", stub.post)
	return stub
