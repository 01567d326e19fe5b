import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from accounts.errors import DuplicateAccount, StorageError
from accounts.models.user import User

logger = logging.getLogger(__name__)


class AccountStore:
    """Persistence for the users table.

    Every driver failure leaves here as DuplicateAccount or StorageError.
    """

    def __init__(self, session: Session):
        self.session = session

    def add(self, user: User) -> User:
        try:
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)
        except IntegrityError:
            self.session.rollback()
            raise DuplicateAccount()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Insert into users failed")
            raise StorageError() from exc
        return user

    def get(self, user_id: int) -> User | None:
        try:
            return self.session.get(User, user_id)
        except SQLAlchemyError as exc:
            logger.exception(f"Lookup of user {user_id} failed")
            raise StorageError() from exc

    def find_by_username(self, username: str) -> User | None:
        try:
            return self.session.exec(
                select(User).where(User.username == username)
            ).first()
        except SQLAlchemyError as exc:
            logger.exception("Lookup by username failed")
            raise StorageError() from exc

    def list_by_role(self, role: int) -> list[User]:
        try:
            return list(
                self.session.exec(
                    select(User).where(User.role == role).order_by(User.id)
                ).all()
            )
        except SQLAlchemyError as exc:
            logger.exception(f"Listing users with role {role} failed")
            raise StorageError() from exc
