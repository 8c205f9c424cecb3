"""Prompt templates for every AI request kind the app makes."""
import json
from typing import Any, Iterable, List, Optional
from langchain_core.prompts import PromptTemplate
from healthconnect.directory import all_doctors
from healthconnect.integrations.gemini import AIServiceError, generate_text, require_key


class UnknownPromptType(AIServiceError):
	status_code = 400

	def __init__(self, kind: str | None):
		super().__init__("Unknown type")
		self.kind = kind


RECORD_PROMPT = PromptTemplate.from_template(
	"Create exactly 3 clinical bullet points for this medical record. Each on a new line starting with •. "
	"Do not use long paragraphs - keep each bullet point concise and on its own line.\n\n"
	"Record: {data}"
)

PRESCRIPTION_PROMPT = PromptTemplate.from_template(
	"Summarize this prescription in 2-3 bullet points. Each on a new line starting with •. "
	"Keep each point concise.\n\n"
	"Prescription: {data}"
)

SUGGEST_PROMPT = PromptTemplate.from_template(
	"Suggest exactly 3 follow-up actions or tests. Return each as a bullet point on a separate line starting with •. "
	"Keep each point concise.\n\n"
	"Record: {data}\n"
	"History: {history}"
)

SUGGEST_RX_PROMPT = PromptTemplate.from_template(
	"List potential drug interactions or complementary medications. Return each as a bullet point on a separate line starting with •. "
	"Keep each point concise.\n\n"
	"Prescription: {data}\n"
	"History: {history}"
)

RECOMMEND_PROMPT = PromptTemplate.from_template(
	"Based on the patient's symptoms and health concerns, recommend the most suitable doctors from this list. "
	"Be conversational and helpful.\n\n"
	"Patient's symptoms/concerns: \"{query}\"\n\n"
	"Available doctors:\n"
	"{doctors}\n\n"
	"Provide a friendly, conversational response (2-3 sentences) analyzing their concern and recommend 1-3 doctors "
	"by name and specialty. End with why you recommend them."
)

PROMPT_KINDS = ("record", "prescription", "ai_suggest", "ai_suggest_rx", "doctor_recommend")


def to_json(value: Any) -> str:
	return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def doctor_lines(doctors: Iterable[dict]) -> str:
	return "\n".join(f"- {d.get('name')} ({d.get('specialty')}): {d.get('about')}" for d in doctors)


def build_prompt(
	kind: str,
	data: Any = None,
	all_records: Optional[List[Any]] = None,
	all_prescriptions: Optional[List[Any]] = None,
	query: Optional[str] = None,
	doctors: Optional[List[dict]] = None,
) -> str:
	if kind == "record":
		return RECORD_PROMPT.format(data=to_json(data))
	if kind == "prescription":
		return PRESCRIPTION_PROMPT.format(data=to_json(data))
	if kind == "ai_suggest":
		return SUGGEST_PROMPT.format(data=to_json(data), history=to_json(all_records))
	if kind == "ai_suggest_rx":
		return SUGGEST_RX_PROMPT.format(data=to_json(data), history=to_json(all_prescriptions))
	if kind == "doctor_recommend":
		if doctors is None:
			doctors = [d.model_dump(include={"doctor_id", "name", "specialty", "about"}) for d in all_doctors()]
		return RECOMMEND_PROMPT.format(query=query or "", doctors=doctor_lines(doctors))
	raise UnknownPromptType(kind)


def ask(kind: str, **inputs) -> str:
	"""Build the prompt for `kind` and return Gemini's text output."""
	require_key()
	return generate_text(build_prompt(kind, **inputs))
