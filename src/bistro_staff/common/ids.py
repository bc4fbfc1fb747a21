from __future__ import annotations

import secrets
import string

from ..core.constants import ID_LENGTH

_ALPHABET = string.ascii_lowercase + string.digits


def new_id(prefix: str = "") -> str:
    """Short random base-36 identifier, optionally prefixed (e.g. ``shift-``)."""
    body = "".join(secrets.choice(_ALPHABET) for _ in range(ID_LENGTH))
    return f"{prefix}{body}"
