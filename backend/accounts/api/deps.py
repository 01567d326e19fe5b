from fastapi import Depends
from sqlmodel import Session

from accounts.config import settings
from accounts.database import get_session
from accounts.services.credentials import CredentialService
from accounts.store import AccountStore


def get_store(session: Session = Depends(get_session)) -> AccountStore:
    return AccountStore(session)


def get_credential_service(
    store: AccountStore = Depends(get_store),
) -> CredentialService:
    return CredentialService(store, settings)
