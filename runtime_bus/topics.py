"""Topic constants for the console bus."""

# View
VIEW_REFRESH = "console.view.refresh"
MODULE_SELECTED = "console.module.selected"
FILTER_CHANGED = "console.filter.changed"

# Menu
LEAF_SELECTED = "console.leaf.selected"

# Groups
GROUP_SAVED = "console.group.saved"
GROUP_DELETED = "console.group.deleted"

# Errors
PERSISTENCE_WARNING = "console.persistence.warning"

__all__ = [
    "VIEW_REFRESH",
    "MODULE_SELECTED",
    "FILTER_CHANGED",
    "LEAF_SELECTED",
    "GROUP_SAVED",
    "GROUP_DELETED",
    "PERSISTENCE_WARNING",
]
