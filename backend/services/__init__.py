"""Services module - Review engine and backend settings"""

from .change_session import ChangeSession, SessionStatus, create_session
from .config_manager import ConfigManager
from .diff_generator import DiffGenerator, compute_line_diff, compute_stats
from .hunk_segmenter import segment_records
from .pending_changes import PendingChangeStore
from .reconstructor import build_content, render_inline
from .review_state import ReviewState

__all__ = [
    "ChangeSession",
    "SessionStatus",
    "create_session",
    "ConfigManager",
    "DiffGenerator",
    "compute_line_diff",
    "compute_stats",
    "segment_records",
    "PendingChangeStore",
    "build_content",
    "render_inline",
    "ReviewState",
]
