import asyncio
import hashlib
from fastapi import Header, HTTPException
from healthconnect.config import settings
from healthconnect.schemas import UserOut
from healthconnect.store import store


def user_id_for(email: str) -> str:
	digest = hashlib.sha1(email.strip().lower().encode("utf-8")).hexdigest()
	return f"user-{digest[:10]}"


async def login(email: str, password: str) -> tuple[str, UserOut]:
	# mock: any password of valid length signs in
	await asyncio.sleep(settings.auth_delay_seconds)
	user = UserOut(user_id=user_id_for(email), name=email.split("@")[0], email=email)
	return store.open_session(user), user


async def register(name: str, email: str, password: str) -> tuple[str, UserOut]:
	await asyncio.sleep(settings.auth_delay_seconds)
	user = UserOut(user_id=user_id_for(email), name=name.strip() or email.split("@")[0], email=email)
	return store.open_session(user), user


def bearer_token(authorization: str | None = Header(None)) -> str | None:
	if not authorization:
		return None
	scheme, _, token = authorization.partition(" ")
	if scheme.lower() != "bearer" or not token.strip():
		return None
	return token.strip()


def current_user(authorization: str | None = Header(None)) -> UserOut:
	token = bearer_token(authorization)
	user = store.user_for(token) if token else None
	if not user:
		raise HTTPException(status_code=401, detail="Not authenticated", headers={"WWW-Authenticate": "Bearer"})
	return user
