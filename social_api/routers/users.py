from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..models.user import SubscriptionRequest, User, UserCreateRequest, UserPatch
from ..repositories.exceptions import NotFoundRepositoryError, RepositoryError
from ..services.exceptions import InvalidOperationError
from ..services.subscription_service import SubscriptionService, get_subscription_service
from ..services.user_deletion_service import UserDeletionService, get_user_deletion_service
from ..services.user_service import UserService, get_user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[User])
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.list_users()


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    user = await service.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="user not found")
    return user


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreateRequest,
    service: UserService = Depends(get_user_service),
):
    try:
        return await service.create_user(payload)
    except RepositoryError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


@router.patch("/{user_id}", response_model=User)
async def update_user(
    user_id: str,
    patch: UserPatch,
    service: UserService = Depends(get_user_service),
):
    try:
        return await service.update_user(user_id, patch)
    except NotFoundRepositoryError:
        raise HTTPException(status_code=404, detail="user not found") from None
    except (InvalidOperationError, RepositoryError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


@router.delete("/{user_id}", response_model=User)
async def delete_user(
    user_id: str,
    service: UserDeletionService = Depends(get_user_deletion_service),
):
    try:
        return await service.delete_user(user_id)
    except NotFoundRepositoryError:
        raise HTTPException(status_code=404, detail="user not found") from None
    except (InvalidOperationError, RepositoryError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


@router.post("/{user_id}/subscribeTo", response_model=User)
async def subscribe_to(
    user_id: str,
    payload: SubscriptionRequest,
    service: SubscriptionService = Depends(get_subscription_service),
):
    try:
        return await service.subscribe(user_id, payload.user_id)
    except NotFoundRepositoryError:
        raise HTTPException(status_code=404, detail="user not found") from None
    except (InvalidOperationError, RepositoryError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


@router.post("/{user_id}/unsubscribeFrom", response_model=User)
async def unsubscribe_from(
    user_id: str,
    payload: SubscriptionRequest,
    service: SubscriptionService = Depends(get_subscription_service),
):
    try:
        return await service.unsubscribe(user_id, payload.user_id)
    except NotFoundRepositoryError:
        raise HTTPException(status_code=404, detail="user not found") from None
    except (InvalidOperationError, RepositoryError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


__all__ = ["router"]
