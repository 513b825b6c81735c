"""Pydantic schemas for av_session API requests/responses."""

from pydantic import BaseModel

from src.av_session.domain.models import SessionState


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""
    role: str = ""


class SessionResponse(BaseModel):
    logged_in: bool
    email: str
    role: str | None

    @classmethod
    def from_domain(cls, session: SessionState) -> "SessionResponse":
        return cls(
            logged_in=session.logged_in,
            email=session.email,
            role=session.role.value if session.role is not None else None,
        )
