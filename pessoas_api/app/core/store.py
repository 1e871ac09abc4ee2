"""
In-memory person storage.

``PersonStore`` maps nicknames to ``PersonRecord`` instances for the
lifetime of the process.  Records are never updated or removed.  The
lock is private: the only way to add a record is ``try_insert``, which
performs the existence check and the insert as one critical section.
"""

import threading
from typing import Dict, Optional

from pessoas_api.app.schemas.person import PersonRecord


class PersonStore:
    """Thread-safe nickname → record table."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: Dict[str, PersonRecord] = {}

    def try_insert(self, nickname: str, record: PersonRecord) -> bool:
        """Insert ``record`` under ``nickname`` unless the key is taken.

        Returns ``True`` when the record was stored and ``False`` when
        the nickname already existed, in which case the store is left
        untouched.
        """
        with self._lock:
            if nickname in self._records:
                return False
            self._records[nickname] = record
            return True

    def get(self, nickname: str) -> Optional[PersonRecord]:
        with self._lock:
            return self._records.get(nickname)

    def __contains__(self, nickname: object) -> bool:
        with self._lock:
            return nickname in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
