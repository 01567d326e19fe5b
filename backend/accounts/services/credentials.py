"""Registration and username/password authentication."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from accounts.auth import (
    MAX_PASSWORD_BYTES,
    burn_verification,
    hash_password,
    verify_password,
)
from accounts.config import Settings
from accounts.errors import InvalidCredentials, InvalidInput, NotFound, StorageError
from accounts.models.user import PublicUser, Role, User, UserProfile
from accounts.store import AccountStore

logger = logging.getLogger(__name__)

# Largest value a BIGINT primary key can hold
MAX_USER_ID = 2**63 - 1


@contextmanager
def _storage_failure(message: str) -> Iterator[None]:
    """Re-raise StorageError with the message for the operation in progress."""
    try:
        yield
    except StorageError as exc:
        raise StorageError(message) from exc


def _blank_to_none(value: str | None) -> str | None:
    return value or None


class CredentialService:
    def __init__(self, store: AccountStore, settings: Settings):
        self.store = store
        self.settings = settings
        self.landing_paths = {
            Role.ADMIN: settings.admin_dashboard_url,
            Role.STUDENT: settings.student_dashboard_url,
        }

    def dashboard_url(self, role: int) -> str:
        """Advisory post-login landing path; anything but an admin gets the student page."""
        return self.landing_paths.get(role, self.settings.student_dashboard_url)

    def register(
        self,
        username: str | None,
        password: str | None,
        roll_number: str | None = None,
        gender: str | None = None,
        email: str | None = None,
        phone_number: str | None = None,
    ) -> int:
        if not username or not password:
            raise InvalidInput()
        if len(password.encode()) > MAX_PASSWORD_BYTES:
            raise InvalidInput(f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")

        user = User(
            username=username,
            roll_number=_blank_to_none(roll_number),
            gender=_blank_to_none(gender),
            email=_blank_to_none(email),
            phone_number=_blank_to_none(phone_number),
            password_hash=hash_password(password, self.settings.bcrypt_rounds),
            role=Role.STUDENT.value,
        )
        with _storage_failure("A server error occurred during registration."):
            user = self.store.add(user)
        logger.info(f"Registered user {user.id}")
        return user.id

    def authenticate(self, username: str | None, password: str | None) -> PublicUser:
        if not username or not password:
            raise InvalidInput()

        with _storage_failure("A server error occurred during login."):
            user = self.store.find_by_username(username)

        if user is None:
            burn_verification(password, self.settings.bcrypt_rounds)
            logger.info("Login rejected")
            raise InvalidCredentials()
        if not verify_password(password, user.password_hash):
            logger.info("Login rejected")
            raise InvalidCredentials()

        logger.info(f"User {user.id} logged in")
        return PublicUser(id=user.id, username=user.username, role=user.role)

    def get_user(self, user_id: int | str) -> UserProfile:
        try:
            user_id = int(user_id)
        except (TypeError, ValueError):
            raise NotFound()
        if not 0 < user_id <= MAX_USER_ID:
            raise NotFound()

        with _storage_failure("Failed to retrieve user data."):
            user = self.store.get(user_id)
        if user is None:
            raise NotFound()
        return UserProfile.model_validate(user)

    def list_users(self, role: int) -> list[UserProfile]:
        with _storage_failure("Failed to retrieve student list."):
            users = self.store.list_by_role(role)
        return [UserProfile.model_validate(u) for u in users]

    def ensure_admin(self, username: str, password: str) -> None:
        """Create the administrator account unless the username is already taken."""
        existing = self.store.find_by_username(username)
        if existing is not None:
            if existing.role != Role.ADMIN:
                logger.warning(
                    f"Admin username {username!r} belongs to a non-admin account; "
                    "no administrator was provisioned"
                )
            return
        self.store.add(
            User(
                username=username,
                password_hash=hash_password(password, self.settings.bcrypt_rounds),
                role=Role.ADMIN.value,
            )
        )
        logger.info(f"Provisioned administrator account {username!r}")
