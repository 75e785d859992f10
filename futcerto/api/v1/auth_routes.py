from typing import Optional

from fastapi import APIRouter, Depends, status

from futcerto.dependencies import get_auth_service, get_current_session, get_token
from futcerto.schemas.auth import (
    CurrentSessionResponse,
    SessionResponse,
    SignInRequest,
    SignUpRequest,
    SignUpResponse,
)
from futcerto.services.auth_service import SIGN_UP_MESSAGES, AuthService, CurrentSession

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/sign-up", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED)
def sign_up(payload: SignUpRequest, auth_service: AuthService = Depends(get_auth_service)):
    identity, profile = auth_service.sign_up(
        payload.email,
        payload.password,
        name=payload.name,
        phone=payload.phone,
        user_type=payload.user_type,
    )
    title, description = SIGN_UP_MESSAGES[profile.user_type]
    return {
        "identity": identity,
        "profile": profile,
        "title": title,
        "description": description,
    }


@router.post("/sign-in", response_model=SessionResponse)
def sign_in(payload: SignInRequest, auth_service: AuthService = Depends(get_auth_service)):
    token, current = auth_service.sign_in(payload.email, payload.password)
    return {
        "access_token": token,
        "token_type": "bearer",
        "expires_at": current.expires_at,
        "identity": current.identity,
        "profile": current.profile,
    }


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(
    token: Optional[str] = Depends(get_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> None:
    auth_service.sign_out(token)


@router.get("/session", response_model=CurrentSessionResponse)
def current_session(current: Optional[CurrentSession] = Depends(get_current_session)):
    if current is None:
        return {"authenticated": False}
    return {
        "authenticated": True,
        "identity": current.identity,
        "profile": current.profile,
    }
