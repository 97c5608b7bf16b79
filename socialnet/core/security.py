# Standard library imports
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError as JWTInvalidTokenError

# Local application imports
from ..domain.exceptions import InvalidTokenError


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    A fresh salt is generated for every call.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed stored hash
        return False


class TokenService:
    """Signs and validates access tokens with an explicitly supplied secret"""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        if not secret_key:
            raise ValueError("Token secret key is required")
        if expire_minutes <= 0:
            raise ValueError("Token expiration must be positive")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def create_token(self, payload: Dict[str, Any]) -> str:
        """
        Create a JWT token with expiration

        Args:
            payload: Dictionary containing token claims (e.g., id)

        Returns:
            Encoded JWT token string
        """
        issued_at = int(time.time())
        expires_at = issued_at + (self.expire_minutes * 60)

        token_payload = {
            **payload,
            "iat": issued_at,
            "exp": expires_at,
        }

        return jwt.encode(token_payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Decode and validate a JWT token

        Args:
            token: The JWT token string to decode

        Returns:
            Dictionary containing decoded token claims

        Raises:
            InvalidTokenError: If token is invalid, tampered or expired
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTInvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}")
