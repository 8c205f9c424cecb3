"""Client for the hosted Gemini generateContent endpoint."""
import requests
from healthconnect.config import settings
from healthconnect.logger import get_logger

log = get_logger("gemini")


class AIServiceError(Exception):
	status_code = 500

	def __init__(self, message: str):
		super().__init__(message)
		self.message = message


class GeminiNotConfigured(AIServiceError):
	status_code = 500

	def __init__(self):
		super().__init__("GEMINI_API_KEY not configured")


class GeminiUpstreamError(AIServiceError):
	status_code = 502


class GeminiEmptyResponse(AIServiceError):
	status_code = 502

	def __init__(self):
		super().__init__("No response from Gemini")


def _endpoint() -> str:
	return f"{settings.gemini_api_base.rstrip('/')}/models/{settings.gemini_model}:generateContent"


def extract_text(body: dict) -> str:
	try:
		return body["candidates"][0]["content"]["parts"][0].get("text") or ""
	except (KeyError, IndexError, TypeError, AttributeError):
		return ""


def require_key() -> str:
	if not settings.gemini_api_key:
		raise GeminiNotConfigured()
	return settings.gemini_api_key


def generate_text(prompt: str) -> str:
	api_key = require_key()
	payload = {
		"contents": [{"parts": [{"text": prompt}]}],
		"generationConfig": {
			"temperature": settings.gemini_temperature,
			"maxOutputTokens": settings.gemini_max_output_tokens,
		},
	}
	try:
		r = requests.post(
			_endpoint(),
			headers={"Content-Type": "application/json", "x-goog-api-key": api_key},
			json=payload,
			timeout=settings.gemini_timeout_seconds,
		)
	except requests.RequestException as e:
		# the exception text can carry the request URL and headers
		reason = type(e).__name__
		log.error("Gemini request failed: %s", reason)
		raise GeminiUpstreamError(f"Gemini API error: {reason}") from e
	if not r.ok:
		log.error("Gemini API error: %s %s", r.status_code, r.text[:300])
		raise GeminiUpstreamError(f"Gemini API error: {r.text}")
	try:
		body = r.json()
	except ValueError as e:
		raise GeminiUpstreamError(f"Gemini API error: {r.text[:300]}") from e
	text = extract_text(body)
	if not text:
		raise GeminiEmptyResponse()
	return text
