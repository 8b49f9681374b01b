from .blob_store import BlobStore, JsonDirBlobStore, MemoryBlobStore
from .editor import EditingSession, GroupEditor
from .errors import (
    ConsoleError,
    EditorStateError,
    IndexOutOfRange,
    NotFound,
    PersistenceWarning,
    ValidationError,
    ValidationReason,
)
from .models import Group, GroupHandle, groups_from_json, groups_to_json
from .store import GROUPS_KEY, GroupStore
from .view_filter import (
    MODE_ALL,
    MODE_GROUPS,
    GroupEntry,
    GroupsView,
    TreeView,
    ViewFilterState,
)

__all__ = [
    "BlobStore",
    "ConsoleError",
    "EditingSession",
    "EditorStateError",
    "GROUPS_KEY",
    "Group",
    "GroupEditor",
    "GroupEntry",
    "GroupHandle",
    "GroupStore",
    "GroupsView",
    "IndexOutOfRange",
    "JsonDirBlobStore",
    "MODE_ALL",
    "MODE_GROUPS",
    "MemoryBlobStore",
    "NotFound",
    "PersistenceWarning",
    "TreeView",
    "ValidationError",
    "ValidationReason",
    "ViewFilterState",
    "groups_from_json",
    "groups_to_json",
]
