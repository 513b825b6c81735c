"""Unified error codes and custom exceptions.

Every failure in the engine is a rejected user action: the held state is left
untouched and the caller turns the error into a user-visible message.

Error code ranges:
  1xxx: Session/Role
  2xxx: Catalog
  3xxx: Cart
  4xxx: Order
  5xxx: Auction
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Session/Role ---

class LoginError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, detail, 422)


class NotLoggedInError(AppError):
    def __init__(self) -> None:
        super().__init__(1002, "Please log in first", 401)


class RoleNotPermittedError(AppError):
    def __init__(self, required_role: str, actual_role: str) -> None:
        super().__init__(
            1003,
            f"This action requires the {required_role} role (current role: {actual_role})",
            403,
        )


# --- 2xxx: Catalog ---

class ListingValidationError(AppError):
    """Missing or malformed listing draft fields.

    ``fields`` maps each offending field to a short reason.
    """

    def __init__(self, fields: dict[str, str]) -> None:
        self.fields = fields
        detail = ", ".join(f"{name}: {reason}" for name, reason in fields.items())
        super().__init__(2001, f"Please fill in all fields ({detail})", 422)


class ListingNotFoundError(AppError):
    def __init__(self, listing_id: int) -> None:
        super().__init__(2002, f"Listing not found: {listing_id}", 404)


# --- 3xxx: Cart ---

class EmptyCartError(AppError):
    def __init__(self) -> None:
        super().__init__(3001, "Cart is empty", 422)


# --- 5xxx: Auction ---

class InvalidBidError(AppError):
    def __init__(self, minimum_display: str, detail: str | None = None) -> None:
        super().__init__(5001, detail or f"Bid must be higher than {minimum_display}", 422)
