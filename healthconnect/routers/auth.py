from fastapi import APIRouter, Depends
from healthconnect.schemas import LoginIn, RegisterIn, SessionOut, UserOut
from healthconnect.services import auth
from healthconnect.services.auth import bearer_token, current_user
from healthconnect.store import store

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/login", response_model=SessionOut)
async def login(payload: LoginIn):
	token, user = await auth.login(payload.email, payload.password)
	return SessionOut(token=token, user=user)

@router.post("/register", response_model=SessionOut)
async def register(payload: RegisterIn):
	token, user = await auth.register(payload.name, payload.email, payload.password)
	return SessionOut(token=token, user=user)

@router.post("/logout")
def logout(token: str | None = Depends(bearer_token)):
	closed = store.close_session(token) if token else False
	return {"logged_out": closed}

@router.get("/me", response_model=UserOut)
def me(user: UserOut = Depends(current_user)):
	return user
