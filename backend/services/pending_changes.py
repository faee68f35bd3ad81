"""
Pending Changes Store - Proposed file changes and their review sessions

At most one pending change exists per file path; proposing a new change
for a path silently replaces the previous one.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from models.review import PendingChange

from .change_session import ChangeSession
from .diff_generator import DiffGenerator
from .errors import ChangeNotFoundError, SessionClosedError

logger = logging.getLogger(__name__)

FileWriter = Callable[[str, str], None]


def write_text_file(file_path: str, content: str) -> None:
    """Default file writer: UTF-8 text, parent directories must exist"""
    Path(file_path).write_text(content, encoding="utf-8")


class PendingChangeStore:
    """Manage pending changes and the sessions reviewing them"""

    _instance = None

    def __init__(
        self,
        writer: FileWriter | None = None,
        diff_generator: DiffGenerator | None = None,
    ):
        self.writer = writer or write_text_file
        self.diff_generator = diff_generator or DiffGenerator()
        self._changes: dict[str, PendingChange] = {}
        self._sessions: dict[str, ChangeSession] = {}

    @classmethod
    def get_instance(cls) -> "PendingChangeStore":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = PendingChangeStore()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def propose(self, file_path: str, original_content: str, new_content: str) -> PendingChange:
        """Register a proposed change and open its review session"""
        # Diff first so an oversized change leaves any existing one in place
        session = ChangeSession(original_content, new_content, self.diff_generator)

        existing = self._find_for_file(file_path)
        if existing is not None:
            logger.info("Superseding pending change %s for %s", existing.id, file_path)
            self._retire(existing.id)

        change = PendingChange(
            id=str(uuid.uuid4()),
            file_path=file_path,
            file_name=file_path.replace("\\", "/").split("/")[-1] or file_path,
            original_content=original_content,
            new_content=new_content,
            timestamp=datetime.now(timezone.utc),
        )
        self._changes[change.id] = change
        self._sessions[change.id] = session

        stats = session.stats
        logger.info(
            "Pending change %s for %s (+%d/-%d)",
            change.id,
            file_path,
            stats.added,
            stats.removed,
        )
        return change

    def get(self, change_id: str) -> PendingChange:
        change = self._changes.get(change_id)
        if change is None:
            raise ChangeNotFoundError(f"No pending change {change_id}")
        return change

    def get_for_file(self, file_path: str) -> PendingChange:
        change = self._find_for_file(file_path)
        if change is None:
            raise ChangeNotFoundError(f"No pending change for {file_path}")
        return change

    def list_changes(self) -> list[PendingChange]:
        return sorted(self._changes.values(), key=lambda c: c.timestamp)

    def session(self, change_id: str) -> ChangeSession:
        self.get(change_id)
        return self._sessions[change_id]

    def commit(self, change_id: str) -> str:
        """Write the reviewed content and forget the change"""
        change = self.get(change_id)
        session = self._sessions[change_id]

        if not session.is_open:
            # Closed outside the store; the file must not be written
            self._drop(change_id)
            raise SessionClosedError(f"Session for change {change_id} already {session.status.value}")

        content = session.preview()
        # A failed write leaves the session open so the user can retry
        self.writer(change.file_path, content)
        session.commit()
        self._drop(change_id)

        logger.info("Wrote reviewed change %s to %s", change_id, change.file_path)
        return content

    def discard(self, change_id: str) -> None:
        """Drop the change; the file keeps its original content"""
        self.get(change_id)
        self._retire(change_id)

    def apply_directly(self, file_path: str, new_content: str) -> None:
        """Write without review, replacing any pending change for the path"""
        existing = self._find_for_file(file_path)
        self.writer(file_path, new_content)
        if existing is not None:
            logger.info("Direct write to %s replaces pending change %s", file_path, existing.id)
            self._retire(existing.id)
        logger.info("Wrote %s without review", file_path)

    def _find_for_file(self, file_path: str) -> PendingChange | None:
        for change in self._changes.values():
            if change.file_path == file_path:
                return change
        return None

    def _retire(self, change_id: str) -> None:
        """Discard the session if still open and forget the change"""
        session = self._sessions.get(change_id)
        if session is not None and session.is_open:
            session.discard()
        self._drop(change_id)

    def _drop(self, change_id: str) -> None:
        self._changes.pop(change_id, None)
        self._sessions.pop(change_id, None)
