"""FastAPI endpoints for authentication and account administration."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from shopsmart.auth.access import authorize, protect
from shopsmart.identity.account.account import Role
from shopsmart.identity.account.administration import ChangeRole, DeleteAccount
from shopsmart.identity.account.authentication import confirm_password, login
from shopsmart.identity.account.profile import UpdateProfile
from shopsmart.identity.account.queries import account_detail, get_account, list_accounts
from shopsmart.identity.account.registration import register_account
from shopsmart.identity.api.schemas import (
    AuthenticatedResponse,
    ChangeRoleRequest,
    LoginRequest,
    MessageResponse,
    ProfileResponse,
    RegisterRequest,
    UpdateProfileRequest,
    VerifyPasswordRequest,
)

auth_router = APIRouter(prefix="/auth", tags=["auth"])
users_router = APIRouter(prefix="/users", tags=["users"])

admin_only = authorize(Role.ADMIN.value)


# --- Authentication ---


@auth_router.post("/register", status_code=201, response_model=AuthenticatedResponse)
async def register(body: RegisterRequest) -> AuthenticatedResponse:
    register_account(
        name=body.name,
        email=body.email,
        password=body.password,
        address=body.address,
        phone=body.phone,
    )
    return AuthenticatedResponse(**login(body.email, body.password))


@auth_router.post("/login", response_model=AuthenticatedResponse)
async def sign_in(body: LoginRequest) -> AuthenticatedResponse:
    return AuthenticatedResponse(**login(body.email, body.password))


@auth_router.post("/verify-password", response_model=MessageResponse)
async def verify_password(body: VerifyPasswordRequest, account=Depends(protect)) -> MessageResponse:
    confirm_password(account, body.password)
    return MessageResponse(message="Password verified")


@auth_router.get("/profile", response_model=ProfileResponse)
async def read_profile(account=Depends(protect)) -> ProfileResponse:
    return ProfileResponse(**account.to_profile())


@auth_router.put("/profile", response_model=ProfileResponse)
async def update_profile(body: UpdateProfileRequest, account=Depends(protect)) -> ProfileResponse:
    command = UpdateProfile(
        account_id=account.id,
        name=body.name,
        address=body.address,
        phone=body.phone,
    )
    current_domain.process(command, asynchronous=False)
    return ProfileResponse(**get_account(account.id).to_profile())


# --- Administration ---


@users_router.get("")
async def read_accounts(admin=Depends(admin_only)):
    return list_accounts()


@users_router.get("/{account_id}")
async def read_account(account_id: str, admin=Depends(admin_only)):
    return account_detail(get_account(account_id))


@users_router.put("/{account_id}/role", response_model=ProfileResponse)
async def change_role(account_id: str, body: ChangeRoleRequest, admin=Depends(admin_only)) -> ProfileResponse:
    command = ChangeRole(acting_account_id=admin.id, account_id=account_id, role=body.role)
    current_domain.process(command, asynchronous=False)
    return ProfileResponse(**get_account(account_id).to_profile())


@users_router.delete("/{account_id}", response_model=MessageResponse)
async def delete_account(account_id: str, admin=Depends(admin_only)) -> MessageResponse:
    get_account(account_id)
    current_domain.process(DeleteAccount(acting_account_id=admin.id, account_id=account_id), asynchronous=False)
    return MessageResponse(message="User removed")
