# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...domain.exceptions import InvalidTokenError
from ...di.container import get_container


security_scheme = HTTPBearer(auto_error=True)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Depends(security_scheme),
) -> str:
    """
    FastAPI dependency to get the authenticated user id from a JWT token

    Args:
        credentials: HTTP Bearer token credentials

    Returns:
        The id carried by the token

    Raises:
        HTTPException: If token is invalid or expired
    """
    token: str = credentials.credentials

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        return get_current_user_use_case.execute(token)
    except InvalidTokenError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exception),
            headers={"WWW-Authenticate": "Bearer"},
        )
