"""bcrypt implementation of PasswordHasher."""

import base64
import hashlib

import bcrypt

# 2^10 iterations: tens of milliseconds per hash on current hardware
DEFAULT_BCRYPT_ROUNDS = 10


def _prehash(plaintext: str) -> bytes:
    # bcrypt reads at most 72 bytes; a base64 SHA-256 digest is always 44
    digest = hashlib.sha256(plaintext.encode('utf-8')).digest()
    return base64.b64encode(digest)


class BcryptPasswordHasher:
    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        """Hash password using bcrypt with a fresh salt.

        The plaintext is reduced to a SHA-256 digest first, so passwords of
        any length are hashed in full.

        Args:
            plaintext: Plain text password

        Returns:
            Bcrypt hash as string (salt and cost embedded)

        Raises:
            TypeError: plaintext is None
        """
        if plaintext is None:
            raise TypeError("Cannot hash a None password")
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(_prehash(plaintext), salt)
        return hashed.decode('utf-8')

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Verify password against hash using the salt embedded in the hash.

        Returns False on mismatch, malformed hash or empty input.
        """
        if not plaintext or not hashed:
            return False
        try:
            return bcrypt.checkpw(_prehash(plaintext), hashed.encode('utf-8'))
        except (ValueError, TypeError, AttributeError):
            return False
