# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import InvalidCredentialsError
from ....core.security import TokenService, verify_password
from ...dto.auth_dto import UserLoginRequest, AuthResponse
from ...mappers import to_user_response

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository, token_service: TokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, request: UserLoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            AuthResponse with token and user

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            raise InvalidCredentialsError()

        if not verify_password(request.password, user.hashed_password):
            logger.warning("Failed login for user %s", user.id)
            raise InvalidCredentialsError()

        token = self.token_service.create_token({"id": user.id})
        return AuthResponse(token=token, user=to_user_response(user))
