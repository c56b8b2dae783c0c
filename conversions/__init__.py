from .hashing import hash_user_data, hash_value, sha256_hex
from .normalize import normalize_user_data
from .records import HashedUserRecord, UserRecord

__all__ = [
    "HashedUserRecord",
    "UserRecord",
    "hash_user_data",
    "hash_value",
    "normalize_user_data",
    "sha256_hex",
]
