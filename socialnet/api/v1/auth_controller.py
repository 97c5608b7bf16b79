# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import UserLoginRequest, AuthResponse, ErrorResponse
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...domain.exceptions import InvalidCredentialsError
from ...di.container import get_container


router = APIRouter(tags=["authentication"])


@router.post("/login", response_model=AuthResponse, responses={401: {"model": ErrorResponse}})
async def login_user(request: UserLoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        AuthResponse with access token and user
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        return await login_use_case.execute(request)
    except InvalidCredentialsError as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exception)
        )
