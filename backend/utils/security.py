from passlib.context import CryptContext
from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone
from typing import Optional
from config.settings import Settings
from utils.errors import InvalidTokenError, NotAuthenticatedError
import logging

logger = logging.getLogger(__name__)

DEFAULT_BCRYPT_ROUNDS = 10

# ============ Password Management ============

def create_password_context(rounds: int = DEFAULT_BCRYPT_ROUNDS) -> CryptContext:
    """
    Build a bcrypt hashing context with the given cost factor.

    Args:
        rounds: bcrypt work factor (log2 of the iteration count)

    Returns:
        Configured CryptContext
    """
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

def hash_password(password: str, context: CryptContext) -> str:
    """
    Hash a plain text password using bcrypt.

    Args:
        password: Plain text password
        context: Hashing context from create_password_context

    Returns:
        Hashed password string
    """
    return context.hash(password)

def verify_password(
    plain_password: str,
    hashed_password: str,
    context: CryptContext
) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Hashed password to compare against
        context: Hashing context from create_password_context

    Returns:
        True if password matches, False otherwise (including unreadable hashes)
    """
    try:
        return context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.error(f"Password could not be verified: {str(e)}")
        return False

# ============ JWT Token Management ============

class TokenGate:
    """
    Issues and validates signed, time-limited access tokens.

    Tokens carry the username as their only identity claim and are never
    stored server side; a token is valid while its signature checks out
    and its ``exp`` is in the future.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_delta: timedelta = timedelta(hours=1)):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenGate":
        return cls(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            expires_delta=settings.token_expires_delta
        )

    def issue(self, username: str, expires_delta: Optional[timedelta] = None) -> str:
        """
        Create a signed access token for ``username``.

        Args:
            username: Identity claim to embed
            expires_delta: Optional custom lifetime. If None, uses the configured window

        Returns:
            Encoded JWT token string

        Example:
            token = gate.issue("alice")
        """
        issued_at = datetime.now(timezone.utc)
        expire = issued_at + (expires_delta if expires_delta is not None else self.expires_delta)

        to_encode = {
            "username": username,
            "iat": issued_at,
            "exp": expire,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def validate(self, token: Optional[str]) -> str:
        """
        Verify a presented token and return its username claim.

        Args:
            token: Raw token string, or None when the client sent none

        Returns:
            Authenticated username

        Raises:
            NotAuthenticatedError: If no token was presented
            InvalidTokenError: If the token is malformed, forged or expired
        """
        if not token:
            raise NotAuthenticatedError()

        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"Rejected token: {str(e)}")
            raise InvalidTokenError()

        username = payload.get("username")
        if not isinstance(username, str):
            logger.warning("Rejected token: missing 'username' claim")
            raise InvalidTokenError()

        return username
