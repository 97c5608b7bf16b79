# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import DuplicateEmailError
from ....core.security import TokenService, hash_password
from ...dto.auth_dto import AuthResponse
from ...dto.user_dto import UserCreateRequest
from ...mappers import to_user_response

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for registering a new user and issuing its first token"""

    def __init__(self, user_repository: UserRepository, token_service: TokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, request: UserCreateRequest) -> AuthResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            AuthResponse with a token carrying the new user's id

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        # The unique index still guards against concurrent registrations
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise DuplicateEmailError(request.email)

        new_user = User(
            id=None,  # Will be set by repository
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            hashed_password=hash_password(request.password),
            picture_path="",
            friends=list(request.friends),
            location=request.location,
            occupation=request.occupation,
            viewed_profile=0,
            impressions=0,
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info("User %s registered", saved_user.id)

        token = self.token_service.create_token({"id": saved_user.id})
        return AuthResponse(token=token, user=to_user_response(saved_user))
