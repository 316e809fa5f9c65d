# carrental/schemas/common.py
from pydantic import BaseModel


class SuccessResponse(BaseModel):
    success: bool = True


class CreatedResponse(SuccessResponse):
    id: int
