from functools import lru_cache

import bcrypt

# bcrypt ignores everything past this many bytes; newer releases reject it outright.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(plain: str, hashed: str) -> bool:
    encoded = plain.encode()
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, hashed.encode())
    except ValueError:
        # stored value is not a bcrypt hash
        return False


@lru_cache(maxsize=4)
def _dummy_hash(rounds: int) -> str:
    return hash_password("not-a-real-password", rounds)


def burn_verification(plain: str, rounds: int = 10) -> None:
    """Spend one bcrypt check so an unknown username costs as much as a wrong password."""
    verify_password(plain, _dummy_hash(rounds))
