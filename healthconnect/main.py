from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from healthconnect.config import settings
from healthconnect.db import engine, Base
from healthconnect import models  # noqa: F401
from healthconnect.routers import auth, doctors, bookings, appointments
from healthconnect.routers import chat, consultation
from healthconnect.routers import medical, prescriptions
from healthconnect.routers import notifications
from healthconnect.routers import ai
from healthconnect.integrations.gemini import AIServiceError
from healthconnect.logger import get_logger

app = FastAPI(title="HealthConnect API", version="1.0.0")
log = get_logger("api")

app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)

app.include_router(auth.router)
app.include_router(doctors.router)
app.include_router(bookings.router)
app.include_router(appointments.router)
app.include_router(chat.router)
app.include_router(consultation.router)
app.include_router(medical.router)
app.include_router(prescriptions.router)
app.include_router(notifications.router)
app.include_router(ai.router)

@app.get("/")

def root():
	return {"status": "ok", "env": settings.app_env, "ai_configured": bool(settings.gemini_api_key)}


@app.exception_handler(AIServiceError)
async def ai_error_handler(request: Request, exc: AIServiceError):
	if exc.status_code >= 500:
		log.error("AI request failed on %s: %s", request.url.path, exc.message)
	return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
	log.exception("Unhandled error: %s", exc)
	return JSONResponse(status_code=500, content={"detail": "Internal server error"})
