"""bcrypt implementation of PasswordHashingProtocol."""

import bcrypt

_COST_RANGE = range(4, 32)


class BcryptPasswordService:
    """Salted bcrypt hashes ($2b$, 60 chars).

    cost_factor is log2 of the work; every +1 doubles hashing time.
    The container passes settings.bcrypt_rounds (12 by default, 4 in tests).
    """

    def __init__(self, cost_factor: int = 12) -> None:
        if cost_factor not in _COST_RANGE:
            raise ValueError(
                f"bcrypt cost factor {cost_factor} outside "
                f"{_COST_RANGE.start}..{_COST_RANGE.stop - 1}"
            )
        self._rounds = cost_factor

    def hash_password(self, password: str) -> str:
        hashed = bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode()

    def verify_password(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except ValueError:
            # not a bcrypt hash ("Invalid salt")
            return False
