# Local application imports
from ....domain.exceptions import InvalidTokenError
from ....core.security import TokenService


class GetCurrentUserUseCase:
    """Use case for extracting the authenticated user id from a JWT token"""

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    def execute(self, token: str) -> str:
        """
        Get current user id from JWT token

        Args:
            token: JWT access token

        Returns:
            The id claim of the token

        Raises:
            InvalidTokenError: If token is invalid, expired or has no id
        """
        payload = self.token_service.decode_token(token)

        user_id = payload.get("id")
        if not user_id:
            raise InvalidTokenError("Invalid authentication payload: missing user ID")
        return str(user_id)
