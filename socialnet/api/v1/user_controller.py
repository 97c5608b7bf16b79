# Standard library imports
import logging
from typing import List

# External package imports
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

# Local application imports
from ...application.dto.auth_dto import AuthResponse, ErrorResponse
from ...application.dto.user_dto import FriendResponse, UserCreateRequest, UserResponse
from ...application.use_cases.user.show_user import ShowUserUseCase
from ...application.use_cases.user.list_user_friends import ListUserFriendsUseCase
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.update_picture import UpdatePictureUseCase
from ...application.use_cases.user.toggle_friend import ToggleFriendUseCase
from ...domain.exceptions import DuplicateEmailError, PictureUploadError
from ...infrastructure.storage.picture_storage import PictureStorage
from ...di.container import get_container
from .dependencies import get_current_user_id


logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


@router.post(
    "",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def store(request: UserCreateRequest) -> AuthResponse:
    """
    Register a new user

    Args:
        request: User creation request

    Returns:
        AuthResponse with a token and the created user
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)

    try:
        return await create_user_use_case.execute(request)
    except DuplicateEmailError as exception:
        logger.warning("Registration rejected, email already in use")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exception)
        )
    except Exception as exception:
        logger.error(f"Error creating user: {exception}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exception)
        )


@router.patch(
    "/picture",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def update_picture(
    picture: UploadFile = File(...),
    current_user_id: str = Depends(get_current_user_id),
) -> UserResponse:
    """
    Upload a new profile picture for the current user

    Args:
        picture: Multipart file field "picture"
        current_user_id: Authenticated user id (from dependency)

    Returns:
        UserResponse with the updated picture path
    """
    container = get_container()
    picture_storage = container.get(PictureStorage)

    try:
        filename = await picture_storage.save(picture)
    except PictureUploadError as exception:
        logger.warning("Picture upload rejected: %s", exception)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )

    update_picture_use_case = container.get(UpdatePictureUseCase)
    try:
        return await update_picture_use_case.execute(current_user_id, filename)
    except Exception as exception:
        logger.error(f"Error updating picture for user {current_user_id}: {exception}", exc_info=True)
        picture_storage.delete(filename)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exception)
        )


@router.patch(
    "/friends/{friend_id}",
    response_model=List[FriendResponse],
    responses={404: {"model": ErrorResponse}},
)
async def update_toggle_friends(
    friend_id: str,
    current_user_id: str = Depends(get_current_user_id),
) -> List[FriendResponse]:
    """
    Add the friend if absent, remove it if present

    Args:
        friend_id: ID of the other user
        current_user_id: Authenticated user id (from dependency)

    Returns:
        The current user's friends after the toggle
    """
    container = get_container()
    toggle_friend_use_case = container.get(ToggleFriendUseCase)

    try:
        return await toggle_friend_use_case.execute(current_user_id, friend_id)
    except Exception as exception:
        logger.warning("Friend toggle %s -> %s failed: %s", current_user_id, friend_id, exception)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}},
)
async def show(user_id: str) -> UserResponse:
    """
    Get a user by ID

    Args:
        user_id: ID of the user

    Returns:
        UserResponse with user information
    """
    container = get_container()
    show_user_use_case = container.get(ShowUserUseCase)

    try:
        return await show_user_use_case.execute(user_id)
    except Exception as exception:
        logger.warning("User lookup %s failed: %s", user_id, exception)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )


@router.get(
    "/{user_id}/friends",
    response_model=List[FriendResponse],
    responses={404: {"model": ErrorResponse}},
)
async def list_user_friends(user_id: str) -> List[FriendResponse]:
    """
    List the friends of a user

    Args:
        user_id: ID of the user

    Returns:
        List of FriendResponse, possibly empty
    """
    container = get_container()
    list_friends_use_case = container.get(ListUserFriendsUseCase)

    try:
        return await list_friends_use_case.execute(user_id)
    except Exception as exception:
        logger.warning("Friend list for %s failed: %s", user_id, exception)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
