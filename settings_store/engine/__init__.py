"""Path resolution and default-schema reconciliation."""

from settings_store.engine.paths import assign, find_shape_conflicts, parse_path, remove, resolve
from settings_store.engine.reconcile import merge_with_defaults, missing_default_paths

__all__ = [
    "assign",
    "find_shape_conflicts",
    "parse_path",
    "remove",
    "resolve",
    "merge_with_defaults",
    "missing_default_paths",
]
