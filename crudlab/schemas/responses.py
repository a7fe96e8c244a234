"""
schemas/responses.py - Shared response models

Called by: routers/*.py
Depends on: pydantic
"""

from pydantic import BaseModel


class CreatedResponse(BaseModel):
    id: int


class ErrorResponse(BaseModel):
    error: str


class ValidationErrorResponse(BaseModel):
    errores: list[str]
