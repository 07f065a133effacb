from fastapi import APIRouter, Depends

from app.api.deps import get_local_user, get_user_service
from app.domain.schemas import (
    ApiResponse,
    LoginIn,
    LoginOut,
    ProfileUpdateIn,
    RegisterIn,
    TokenUser,
    UserOut,
    VerifyIn,
)
from app.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/register", response_model=ApiResponse[UserOut], status_code=201)
def register(payload: RegisterIn, svc: UserService = Depends(get_user_service)):
    user = svc.register(payload)
    return {
        "success": True,
        "message": "User registered successfully",
        "data": UserOut.model_validate(user),
    }


@router.post("/login", response_model=ApiResponse[LoginOut])
def login(payload: LoginIn, svc: UserService = Depends(get_user_service)):
    user, token = svc.login(payload.email, payload.password)
    return {
        "success": True,
        "message": "Login successful",
        "data": LoginOut(user=UserOut.model_validate(user), token=token),
    }


@router.get("/profile", response_model=ApiResponse[UserOut])
def get_profile(
    claims: dict = Depends(get_local_user),
    svc: UserService = Depends(get_user_service),
):
    return {"success": True, "data": UserOut.model_validate(svc.get_profile(claims["id"]))}


@router.put("/profile", response_model=ApiResponse[UserOut])
def update_profile(
    payload: ProfileUpdateIn,
    claims: dict = Depends(get_local_user),
    svc: UserService = Depends(get_user_service),
):
    user = svc.update_profile(claims["id"], payload)
    return {
        "success": True,
        "message": "Profile updated successfully",
        "data": UserOut.model_validate(user),
    }


@router.get("", response_model=ApiResponse[list[UserOut]])
def list_users(
    claims: dict = Depends(get_local_user),
    svc: UserService = Depends(get_user_service),
):
    users = [UserOut.model_validate(u) for u in svc.list_users(claims.get("role"))]
    return {"success": True, "data": users, "count": len(users)}


@router.post("/verify", response_model=ApiResponse[TokenUser])
def verify(payload: VerifyIn, svc: UserService = Depends(get_user_service)):
    """Dla innych serwisow: czy token jest wazny i uzytkownik aktywny."""
    user = svc.verify_token(payload.token)
    return {"success": True, "data": TokenUser.model_validate(user)}
