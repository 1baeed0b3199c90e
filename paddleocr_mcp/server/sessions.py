from collections.abc import Callable

from paddleocr_mcp.logging.logger import Log
from paddleocr_mcp.ocr.models import ApiCredentials

OnCreate = Callable[[str, ApiCredentials], None]
OnEvict = Callable[[str], None]


class SessionRegistry:
    """Per-session OCR credentials captured when an HTTP session initializes.

    Owned by the HTTP front end and passed to the tool handler; there is no
    module-level session state.
    """

    def __init__(
        self,
        *,
        on_create: OnCreate | None = None,
        on_evict: OnEvict | None = None,
    ) -> None:
        self._sessions: dict[str, ApiCredentials] = {}
        self._on_create = on_create
        self._on_evict = on_evict

    def create(self, session_id: str, credentials: ApiCredentials) -> None:
        self._sessions[session_id] = credentials
        Log.info(f"Session {session_id} registered")
        if self._on_create is not None:
            self._on_create(session_id, credentials)

    def lookup(self, session_id: str | None) -> ApiCredentials | None:
        if session_id is None:
            return None
        return self._sessions.get(session_id)

    def evict(self, session_id: str) -> bool:
        """Drop a session. Returns False if it was not registered."""
        if self._sessions.pop(session_id, None) is None:
            return False
        Log.info(f"Session {session_id} evicted")
        if self._on_evict is not None:
            self._on_evict(session_id)
        return True

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
