"""Login/logout and the buyer/seller gate.

Login checks presence only; there is no credential store.
"""

from src.av_common.enums import Role
from src.av_common.errors import LoginError, NotLoggedInError, RoleNotPermittedError
from src.av_session.domain.models import SessionState


def login(session: SessionState, email: str, password: str, role: Role | str | None) -> SessionState:
    if not role:
        raise LoginError("Please select a role")
    try:
        parsed_role = Role(role)
    except ValueError:
        raise LoginError(f"Unknown role: {role}") from None
    if not email or not email.strip() or not password:
        raise LoginError("Please enter email and password")
    return SessionState(logged_in=True, email=email.strip(), role=parsed_role)


def logout(session: SessionState) -> SessionState:
    return SessionState()


def require_logged_in(session: SessionState) -> None:
    if not session.logged_in:
        raise NotLoggedInError()


def require_role(session: SessionState, role: Role) -> None:
    require_logged_in(session)
    if session.role != role:
        actual = session.role.value if session.role is not None else "none"
        raise RoleNotPermittedError(role.value, actual)
