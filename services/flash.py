# services/flash.py
from __future__ import annotations
from typing import Optional

# One-shot notices, keyed by user id. Set after a mutation, consumed by the
# next listing request of the same user. Process-local.
_notices: dict[str, str] = {}

def flash_success(user_id, message: str) -> None:
    _notices[str(user_id)] = message

def pop_flash(user_id) -> Optional[dict[str, str]]:
    message = _notices.pop(str(user_id), None)
    return {"success": message} if message else None
