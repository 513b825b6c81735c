"""Session domain model for the single local actor."""

from dataclasses import dataclass

from src.av_common.enums import Role


@dataclass(frozen=True)
class SessionState:
    logged_in: bool = False
    email: str = ""
    role: Role | None = None
