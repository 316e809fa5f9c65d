# carrental/api/routers/auth.py
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from carrental.core.config import Settings, get_settings
from carrental.core.security import is_admin_password
from carrental.schemas.auth import LoginRequest, LoginResponse

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"description": "Wrong password"}},
)
async def login(payload: LoginRequest, settings: Settings = Depends(get_settings)):
    """
    Check the admin password. On success the password itself comes back
    as the bearer token; there is no session to create or expire.
    """
    if not is_admin_password(payload.password, settings):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"success": False},
        )
    return LoginResponse(token=settings.ADMIN_PASSWORD)
