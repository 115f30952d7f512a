# taskhub/routers/auth.py
import logging

from fastapi import APIRouter, Depends, status

from taskhub.routers.deps import get_user_service
from taskhub.schemas import AuthResponse, SuccessResponse, UserCreate, UserLogin, UserOut, UserUpdate
from taskhub.services import UserService
from taskhub.utils.auth import get_current_user_id
from taskhub.utils.responses import success_response

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", response_model=SuccessResponse[AuthResponse], status_code=status.HTTP_201_CREATED)
def signup(body: UserCreate, service: UserService = Depends(get_user_service)):
    user, token = service.sign_up(body.email, body.password, body.name or "")
    data = AuthResponse(user=UserOut.model_validate(user), token=token)
    return success_response(data, "User registered successfully")


@router.post("/login", response_model=SuccessResponse[AuthResponse])
def login(body: UserLogin, service: UserService = Depends(get_user_service)):
    user, token = service.login(body.email, body.password)
    logger.info(f"User logged in: {user.id}")
    data = AuthResponse(user=UserOut.model_validate(user), token=token)
    return success_response(data, "Login successful")


@router.get("/me", response_model=SuccessResponse[UserOut])
def get_me(user_id: str = Depends(get_current_user_id), service: UserService = Depends(get_user_service)):
    user = service.get_profile(user_id)
    return success_response(UserOut.model_validate(user), "Profile retrieved successfully")


@router.put("/me", response_model=SuccessResponse[UserOut])
def update_me(
    body: UserUpdate,
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
):
    user = service.update_profile(user_id, body.model_dump(exclude_unset=True))
    return success_response(UserOut.model_validate(user), "Profile updated successfully")
