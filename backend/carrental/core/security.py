# carrental/core/security.py

import secrets

from carrental.core.config import Settings


# --------------------------------------
# Shared-secret admin check
# --------------------------------------
# There is no user table and no token store: the admin "token" handed out
# by /api/login is the configured password itself, replayed as a bearer value.

def is_admin_password(candidate: str | None, settings: Settings) -> bool:
    if not candidate:
        return False
    return secrets.compare_digest(
        candidate.encode("utf-8"),
        settings.ADMIN_PASSWORD.encode("utf-8"),
    )
