"""
Domain exceptions raised by the service layer.

Each exception carries the HTTP status the API renders it with; the handlers
in app.main turn them into ``{"error_message": ...}`` responses.
"""


class AuctionError(Exception):
    """Base class for all expected business-rule failures."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ServerError(AuctionError):
    status_code = 500
    default_message = "Server error"


class ValidationError(AuctionError):
    status_code = 400
    default_message = "Invalid input"


class InvalidCredentials(AuctionError):
    status_code = 400
    default_message = "Invalid email or password"


# --- Not found ---
class NotFoundError(AuctionError):
    status_code = 404
    default_message = "Not found"


class UserNotFound(NotFoundError):
    default_message = "User not found"


class ItemNotFound(NotFoundError):
    default_message = "Item not found"


class QuestionNotFound(NotFoundError):
    default_message = "Question not found"


# --- Unauthorized ---
class UnauthorizedError(AuctionError):
    status_code = 401
    default_message = "Unauthorised"


class MissingToken(UnauthorizedError):
    default_message = "Missing token"


class InvalidToken(UnauthorizedError):
    default_message = "Invalid token"


class AuthenticationRequired(UnauthorizedError):
    default_message = "Authentication required for status filter"


# --- Forbidden ---
class ForbiddenError(AuctionError):
    status_code = 403
    default_message = "Forbidden"


class SellerCannotBid(ForbiddenError):
    default_message = "You cannot bid as the seller on this item"


class SellerCannotAsk(ForbiddenError):
    default_message = "You cannot ask a question on your own item"


class NotItemSeller(ForbiddenError):
    default_message = "Only the item's seller can answer questions"


# --- Conflict (rendered as 400) ---
class ConflictError(AuctionError):
    status_code = 400
    default_message = "Conflict"


class DuplicateEmail(ConflictError):
    default_message = "Email already exists"


class BidTooLow(ConflictError):
    default_message = "Bid must be higher than current bid"
