import asyncio
import logging

from pantry.domain.user import CreateUserPayload, PubUserInfo, User, UserRepository
from pantry_auth.services import PasswordHasher

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Command to register a new user.

    Hashing is CPU-bound, so it runs in a worker thread and the event loop
    stays free while the key derivation is computed.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
    ):
        self._user_repo = user_repository
        self._password_hasher = password_hasher

    async def execute(self, payload: CreateUserPayload) -> PubUserInfo:
        user = await asyncio.to_thread(User.create, payload, self._password_hasher)
        created = await self._user_repo.insert(user)
        logger.info("Registered user %s", created.user_id)
        return created
