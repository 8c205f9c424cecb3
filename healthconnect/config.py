from pydantic_settings import BaseSettings
from pydantic import Field

class Settings(BaseSettings):
	app_env: str = Field(default="development")
	database_url: str = Field(default="sqlite:///./healthconnect.db")
	timezone: str = Field(default="UTC")

	gemini_api_key: str | None = None
	gemini_model: str = Field(default="gemini-2.5-flash")
	gemini_api_base: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
	gemini_temperature: float = Field(default=0.7)
	gemini_max_output_tokens: int = Field(default=1024)
	gemini_timeout_seconds: float = Field(default=30.0)

	# simulated latency of the mocked flows
	auth_delay_seconds: float = Field(default=0.8)
	payment_delay_seconds: float = Field(default=1.5)
	chat_reply_delay_seconds: float = Field(default=1.5)
	chat_reply_jitter_seconds: float = Field(default=1.0)

	notification_ttl_seconds: float = Field(default=5.0)
	booking_window_days: int = Field(default=7)

	class Config:
		env_file = ".env"
		env_file_encoding = "utf-8"

settings = Settings()
