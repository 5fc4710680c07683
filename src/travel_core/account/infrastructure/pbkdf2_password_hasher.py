import hashlib
import hmac
import os

from travel_core.account.domain.capability import PasswordHasher

DEFAULT_ITERATIONS = 100_000
SALT_BYTES = 16


class Pbkdf2PasswordHasher(PasswordHasher):
    """PBKDF2-HMAC-SHA256 によるパスワードハッシュ

    保存形式は "<salt hex>$<hash hex>"。ソルトはハッシュごとに生成する。
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS) -> None:
        self._iterations = iterations

    def hash(self, plaintext: str) -> str:
        salt = os.urandom(SALT_BYTES)
        digest = self._derive(plaintext, salt)
        return f"{salt.hex()}${digest.hex()}"

    def verify(self, plaintext: str, hashed: str) -> bool:
        """形式が不正なハッシュは不一致として扱う"""
        salt_hex, sep, hash_hex = hashed.partition("$")
        if not sep:
            return False
        try:
            salt = bytes.fromhex(salt_hex)
            expected = bytes.fromhex(hash_hex)
        except ValueError:
            return False
        return hmac.compare_digest(self._derive(plaintext, salt), expected)

    def _derive(self, plaintext: str, salt: bytes) -> bytes:
        return hashlib.pbkdf2_hmac(
            "sha256", plaintext.encode("utf-8"), salt, self._iterations
        )
