"""
Users router for login, registration, and profile lookup.
"""
from fastapi import APIRouter, Depends, status

from bookshelf.dependencies.services import get_auth_service, get_user_service
from bookshelf.schemas.auth import LoginRequest, RegisterRequest, RegisterResponse
from bookshelf.schemas.common import MessageResponse
from bookshelf.schemas.user import UserProfileResponse
from bookshelf.services.auth_service import AuthService
from bookshelf.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "/login",
    response_model=UserProfileResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": MessageResponse}},
    summary="Login with email and password",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with email and password.
    
    Returns the user's name and book collection.
    """
    return await auth_service.login(body)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account.
    
    - **name**: Display name
    - **email**: Valid email address (must be unique)
    - **password**: Password
    - **passwordConfirmation**: Must match password
    """
    return await auth_service.register(body)


@router.get(
    "/{user_id}",
    response_model=UserProfileResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": MessageResponse}},
    summary="Get a user's profile",
)
async def get_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
):
    """Get the name and book collection of a user."""
    return await user_service.get_profile(user_id)
