from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..models.member_type import MemberType, MemberTypePatch
from ..repositories.exceptions import NotFoundRepositoryError, RepositoryError
from ..services.member_type_service import MemberTypeService, get_member_type_service

router = APIRouter(prefix="/member-types", tags=["member-types"])


@router.get("", response_model=List[MemberType])
async def list_member_types(service: MemberTypeService = Depends(get_member_type_service)):
    return await service.list_member_types()


@router.get("/{member_type_id}", response_model=MemberType)
async def get_member_type(
    member_type_id: str,
    service: MemberTypeService = Depends(get_member_type_service),
):
    member_type = await service.get_member_type(member_type_id)
    if not member_type:
        raise HTTPException(status_code=404, detail="member type not found")
    return member_type


@router.patch("/{member_type_id}", response_model=MemberType)
async def update_member_type(
    member_type_id: str,
    patch: MemberTypePatch,
    service: MemberTypeService = Depends(get_member_type_service),
):
    try:
        return await service.update_member_type(member_type_id, patch)
    except NotFoundRepositoryError:
        raise HTTPException(status_code=404, detail="member type not found") from None
    except RepositoryError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


__all__ = ["router"]
