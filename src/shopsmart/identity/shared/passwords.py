"""Password hashing with bcrypt.

bcrypt only looks at the first 72 bytes of a password and current releases
refuse anything longer, so the limit is checked in bytes before hashing.
"""

import bcrypt

MAX_PASSWORD_BYTES = 72


def fits_bcrypt(password: str) -> bool:
    return len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash or not fits_bcrypt(password):
        return False
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
