# carrental/schemas/auth.py
from pydantic import BaseModel


class LoginRequest(BaseModel):
    password: str


class LoginResponse(BaseModel):
    success: bool = True
    # Same value as the admin password; replayed as "Authorization: Bearer <token>"
    token: str
