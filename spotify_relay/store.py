# spotify_relay/store.py
'''
In-memory token store keyed by OAuth `state`.
 - Tokens are Fernet-encrypted while they sit in the mapping.
 - No expiry sweep: entries live until replaced, deleted, or the process exits.
'''

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from cryptography.fernet import Fernet

# A record this close to expiry is treated as unusable.
EXPIRY_MARGIN = 5


@dataclass(frozen=True)
class TokenRecord:
    access_token: str
    refresh_token: Optional[str]
    expires_at: float  # POSIX seconds

    def is_usable(self, now: float | None = None, margin: float = EXPIRY_MARGIN) -> bool:
        now = time.time() if now is None else now
        return self.expires_at > now + margin


class TokenStore:
    def __init__(self, fernet: Fernet | None = None):
        self._fernet = fernet or Fernet(Fernet.generate_key())
        self._entries: Dict[str, Tuple[str, Optional[str], float]] = {}
        self._lock = threading.Lock()

    def _encrypt(self, token: str) -> str:
        return self._fernet.encrypt(token.encode()).decode()

    def _decrypt(self, token: str) -> str:
        return self._fernet.decrypt(token.encode()).decode()

    def put(self, state: str, record: TokenRecord) -> None:
        refresh = self._encrypt(record.refresh_token) if record.refresh_token else None
        entry = (self._encrypt(record.access_token), refresh, record.expires_at)
        with self._lock:
            self._entries[state] = entry

    def get(self, state: str) -> Optional[TokenRecord]:
        with self._lock:
            entry = self._entries.get(state)
        if entry is None:
            return None
        access, refresh, expires_at = entry
        return TokenRecord(
            access_token=self._decrypt(access),
            refresh_token=self._decrypt(refresh) if refresh else None,
            expires_at=expires_at,
        )

    def delete(self, state: str) -> None:
        with self._lock:
            self._entries.pop(state, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, state) -> bool:
        with self._lock:
            return state in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
