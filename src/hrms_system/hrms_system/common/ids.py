from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque record identifier (uuid4, hex form)."""
    return uuid.uuid4().hex
