"""Closed set of failures the account service reports to callers.

Each carries the HTTP status it maps to and a message that is safe to
return to the client. Driver errors never cross this boundary.
"""


class AccountError(Exception):
    status_code: int = 500
    message: str = "A server error occurred."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInput(AccountError):
    status_code = 400
    message = "Username and password are required."


class InvalidCredentials(AccountError):
    status_code = 401
    message = "Invalid credentials"


class NotFound(AccountError):
    status_code = 404
    message = "User not found."


class DuplicateAccount(AccountError):
    status_code = 409
    message = "User already exists (username, email, or roll number)."


class StorageError(AccountError):
    status_code = 500
    message = "A server error occurred."


ROUTE_NOT_FOUND_MESSAGE = "Route not found. Check the URL and method."
