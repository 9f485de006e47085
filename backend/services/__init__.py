"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_generator import DiffGenerator
from .edit_engine import EditEngine, EditResult
from .edit_service import EditService
from .line_info import LineInfoReader
from .path_guard import PathGuard
from .state_manager import PendingEditStore

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "EditEngine",
    "EditResult",
    "EditService",
    "LineInfoReader",
    "PathGuard",
    "PendingEditStore",
]
