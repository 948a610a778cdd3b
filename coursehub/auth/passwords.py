"""bcrypt password hashing. Salts are generated per call and stored in the hash."""

import bcrypt

DEFAULT_ROUNDS = 10
BCRYPT_MAX_BYTES = 72


def _truncate_for_bcrypt(password: str) -> bytes:
    """bcrypt only reads the first 72 bytes; newer releases reject longer input."""
    return password.encode('utf-8')[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    return bcrypt.hashpw(_truncate_for_bcrypt(password), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_truncate_for_bcrypt(password), password_hash.encode())
    except (ValueError, TypeError):
        return False
