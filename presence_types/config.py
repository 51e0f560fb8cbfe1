from __future__ import annotations

import os

# Environment-driven defaults
STRICT_VALIDATE = os.environ.get("PRESENCE_TYPES_STRICT_VALIDATE", "1") != "0"
SHARE_EMPTY = os.environ.get("PRESENCE_TYPES_SHARE_EMPTY", "1") != "0"


def set_strict_validate(enabled: bool) -> None:
    """Enable or disable type checks on wrapped values and flat_map results."""
    global STRICT_VALIDATE
    STRICT_VALIDATE = bool(enabled)


def set_share_empty(enabled: bool) -> None:
    """Reuse one absent instance per wrapper class, or build a fresh one per ``empty()``."""
    global SHARE_EMPTY
    SHARE_EMPTY = bool(enabled)
