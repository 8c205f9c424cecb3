from fastapi import APIRouter
from healthconnect.schemas import SuggestionOut, SyncRequest
from healthconnect.services.prompts import ask

router = APIRouter(prefix="/api/gemini", tags=["ai"])

@router.post("/sync", response_model=SuggestionOut)
def sync(payload: SyncRequest):
	summary = ask(
		payload.type,
		data=payload.data,
		all_records=payload.all_records,
		all_prescriptions=payload.all_prescriptions,
		query=payload.query,
		doctors=payload.doctors,
	)
	return SuggestionOut(summary=summary)
