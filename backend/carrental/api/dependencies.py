# carrental/api/dependencies.py
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from carrental.core.config import Settings, get_settings
from carrental.core.logger import get_logger
from carrental.core.security import is_admin_password

logger = get_logger(__name__)
security = HTTPBearer(auto_error=False)


async def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Gate for every /api/admin route: the bearer value must be the admin
    password. Raising here means the route handler never runs.
    """
    # scheme must be spelled exactly "Bearer"
    token = credentials.credentials if credentials and credentials.scheme == "Bearer" else None
    if not is_admin_password(token, settings):
        logger.info("Rejected admin request: %s", "bad token" if token else "no token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
