from passlib.exc import PasswordValueError
from starlette.concurrency import run_in_threadpool
from config.settings import Settings
from core.state import CredentialStore
from models.user import UserRecord
from utils.errors import InvalidCredentialsError, InvalidPasswordError, UserNotFoundError
from utils.security import TokenGate, create_password_context, hash_password, verify_password
import logging

logger = logging.getLogger(__name__)

class CredentialService:
    """
    Registration and login on top of the credential store.
    bcrypt work runs in the threadpool so it only stalls its own request.
    """

    def __init__(self, store: CredentialStore, token_gate: TokenGate, settings: Settings):
        self.store = store
        self.token_gate = token_gate
        self.settings = settings
        self._pwd_context = create_password_context(settings.BCRYPT_ROUNDS)

    async def register(self, username: str, password: str) -> UserRecord:
        """
        Hash the password and append a new record.

        Neither empty nor duplicate usernames are rejected; a duplicate is
        stored after the existing record and is shadowed by it at login.

        Args:
            username: Username to register
            password: Plain text password

        Returns:
            The stored UserRecord

        Raises:
            InvalidPasswordError: bcrypt refuses the password (NUL byte, oversize)
        """
        try:
            password_hash = await run_in_threadpool(hash_password, password, self._pwd_context)
        except PasswordValueError as e:
            logger.warning(f"Registration failed: Unusable password - {username}: {str(e)}")
            raise InvalidPasswordError()

        record = await self.store.add(UserRecord(username=username, password_hash=password_hash))

        logger.info(f"User registered: {username}")
        return record

    async def login(self, username: str, password: str) -> str:
        """
        Verify credentials and issue an access token.

        Args:
            username: Username to look up (exact match, first record wins)
            password: Plain text password

        Returns:
            Signed access token

        Raises:
            UserNotFoundError: No record with this username
            InvalidCredentialsError: Password does not match
        """
        record = await self.store.find(username)
        if record is None:
            logger.warning(f"Login failed: User not found - {username}")
            raise UserNotFoundError()

        valid = await run_in_threadpool(
            verify_password, password, record.password_hash, self._pwd_context
        )
        if not valid:
            logger.warning(f"Login failed: Invalid password - {username}")
            raise InvalidCredentialsError()

        token = self.token_gate.issue(record.username)
        logger.info(f"Token issued for {record.username}")
        return token

    async def bootstrap(self) -> None:
        """Preload the demo account from settings, if one is configured."""
        username = self.settings.DEMO_USERNAME
        if not username:
            return

        await self.register(username, self.settings.DEMO_PASSWORD)
        logger.info(f"Default user added: {username}")
