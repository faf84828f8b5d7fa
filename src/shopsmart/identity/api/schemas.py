"""Pydantic request/response schemas for the account and auth API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class RegisterRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Jane Doe",
                    "email": "jane.doe@example.com",
                    "password": "s3cret-pass",
                    "address": "12 Market Street, Springfield",
                    "phone": "+1-555-0123",
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=72)
    address: str = Field(..., max_length=500)
    phone: str = Field(..., max_length=20)


class LoginRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "jane.doe@example.com", "password": "s3cret-pass"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class VerifyPasswordRequest(BaseModel):
    password: str = Field(..., max_length=128)


class UpdateProfileRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"name": "Jane Smith", "address": "7 Elm Road", "phone": "+1-555-0456"}]}
    }

    name: str | None = Field(None, max_length=100)
    address: str | None = Field(None, max_length=500)
    phone: str | None = Field(None, max_length=20)


class ChangeRoleRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"role": "admin"}]}}

    role: str = Field(..., max_length=20)


# --- Response Schemas ---


class ProfileResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    address: str | None = None
    phone: str | None = None
    created_at: str | None = None


class AuthenticatedResponse(ProfileResponse):
    token: str


class MessageResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"message": "ok"}]}}

    message: str
