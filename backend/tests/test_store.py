import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from accounts.auth import hash_password
from accounts.errors import DuplicateAccount, StorageError
from accounts.models.user import User
from accounts.store import AccountStore


def _user(username: str) -> User:
    return User(username=username, password_hash=hash_password("pw", rounds=4))


def test_add_assigns_id(session: Session):
    store = AccountStore(session)
    user = store.add(_user("carol"))
    assert user.id is not None
    assert store.get(user.id).username == "carol"
    assert store.find_by_username("carol").id == user.id


def test_add_duplicate_rolls_back(session: Session):
    store = AccountStore(session)
    store.add(_user("carol"))
    with pytest.raises(DuplicateAccount):
        store.add(_user("carol"))
    # session is still usable and no second row exists
    rows = session.exec(select(User).where(User.username == "carol")).all()
    assert len(rows) == 1


def test_password_column_holds_hash(session: Session):
    store = AccountStore(session)
    user = store.add(_user("carol"))
    row = session.connection().exec_driver_sql(
        "SELECT password FROM users WHERE id = ?", (user.id,)
    ).one()
    assert row[0].startswith("$2b$")


def test_list_by_role(session: Session):
    store = AccountStore(session)
    store.add(_user("carol"))
    assert [u.username for u in store.list_by_role(0)] == ["carol"]
    assert [u.username for u in store.list_by_role(1)] == ["admin"]


def test_driver_errors_become_storage_error(session: Session, monkeypatch):
    store = AccountStore(session)

    def boom(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr(session, "exec", boom)
    monkeypatch.setattr(session, "get", boom)
    with pytest.raises(StorageError):
        store.find_by_username("carol")
    with pytest.raises(StorageError):
        store.list_by_role(0)
    with pytest.raises(StorageError):
        store.get(1)


def test_commit_failure_becomes_storage_error(session: Session, monkeypatch):
    store = AccountStore(session)

    def boom():
        raise OperationalError("INSERT", {}, Exception("disk full"))

    monkeypatch.setattr(session, "commit", boom)
    with pytest.raises(StorageError):
        store.add(_user("carol"))
