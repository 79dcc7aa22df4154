from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..models.profile import Profile, ProfileCreateRequest, ProfilePatch
from ..repositories.exceptions import NotFoundRepositoryError, RepositoryError
from ..services.exceptions import InvalidOperationError
from ..services.profile_service import ProfileService, get_profile_service

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("", response_model=List[Profile])
async def list_profiles(service: ProfileService = Depends(get_profile_service)):
    return await service.list_profiles()


@router.get("/{profile_id}", response_model=Profile)
async def get_profile(profile_id: str, service: ProfileService = Depends(get_profile_service)):
    profile = await service.get_profile(profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="profile not found")
    return profile


@router.post("", response_model=Profile, status_code=status.HTTP_201_CREATED)
async def create_profile(
    payload: ProfileCreateRequest,
    service: ProfileService = Depends(get_profile_service),
):
    try:
        return await service.create_profile(payload)
    except (InvalidOperationError, RepositoryError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


@router.patch("/{profile_id}", response_model=Profile)
async def update_profile(
    profile_id: str,
    patch: ProfilePatch,
    service: ProfileService = Depends(get_profile_service),
):
    try:
        return await service.update_profile(profile_id, patch)
    except NotFoundRepositoryError:
        raise HTTPException(status_code=404, detail="profile not found") from None
    except (InvalidOperationError, RepositoryError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


@router.delete("/{profile_id}", response_model=Profile)
async def delete_profile(profile_id: str, service: ProfileService = Depends(get_profile_service)):
    try:
        return await service.delete_profile(profile_id)
    except NotFoundRepositoryError:
        raise HTTPException(status_code=404, detail="profile not found") from None
    except (InvalidOperationError, RepositoryError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


__all__ = ["router"]
