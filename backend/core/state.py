"""In-memory credential store"""

import asyncio
from typing import List, Optional

from models.user import UserRecord


class CredentialStore:
    """
    Ordered, process-local list of user records.

    Usernames are not unique: ``find`` returns the first match.
    Nothing survives a restart.
    """

    def __init__(self):
        self._records: List[UserRecord] = []
        self._lock = asyncio.Lock()

    async def add(self, record: UserRecord) -> UserRecord:
        async with self._lock:
            self._records.append(record)
        return record

    async def find(self, username: str) -> Optional[UserRecord]:
        async with self._lock:
            for record in self._records:
                if record.username == username:
                    return record
        return None

    def records(self) -> List[UserRecord]:
        return list(self._records)

    def __len__(self):
        return len(self._records)
