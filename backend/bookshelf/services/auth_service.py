"""
Authentication service for login and registration.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from bookshelf.core.exceptions import (
    DuplicateUser,
    InvalidCredentials,
    InvalidPassword,
    PasswordMismatch,
)
from bookshelf.core.security import hash_password, verify_password
from bookshelf.schemas.auth import LoginRequest, RegisterRequest, RegisterResponse
from bookshelf.schemas.user import UserProfileResponse
from bookshelf.services.book_service import BookService
from bookshelf.services.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the library database."""
        self.users = UserRepository(db)
        self.books = BookService(db)

    async def login(self, request: LoginRequest) -> UserProfileResponse:
        """
        Check credentials and return the user's profile.
        
        Args:
            request: Login request with email and password
            
        Returns:
            UserProfileResponse with name and books
            
        Raises:
            InvalidCredentials: If no account has this email
            InvalidPassword: If the password does not match
        """
        user = await self.users.find_by_email(request.email)
        if user is None:
            logger.info(f"Login rejected for unknown email {request.email}")
            raise InvalidCredentials()

        if not verify_password(request.password, user.password):
            logger.info(f"Login rejected for {request.email}: wrong password")
            raise InvalidPassword()

        books = await self.books.resolve_books(user.books)
        return UserProfileResponse(name=user.name, books=books)

    async def register(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a new user.
        
        Args:
            request: Registration request with name, email and passwords
            
        Returns:
            RegisterResponse confirmation
            
        Raises:
            PasswordMismatch: If password and confirmation differ
            DuplicateUser: If the email is already registered
        """
        # Validate passwords match before touching the database
        if not request.passwords_match():
            raise PasswordMismatch()

        existing = await self.users.find_by_email(request.email)
        if existing is not None:
            raise DuplicateUser()

        try:
            user_id = await self.users.insert(
                name=request.name,
                email=request.email,
                hashed_password=hash_password(request.password),
            )
        except DuplicateKeyError:
            # Another registration for the same email landed first
            raise DuplicateUser()

        logger.info(f"Registered user {user_id} ({request.email})")
        return RegisterResponse(message="Account created")
