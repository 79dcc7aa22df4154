from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..models.post import Post, PostCreateRequest, PostPatch
from ..repositories.exceptions import NotFoundRepositoryError, RepositoryError
from ..services.exceptions import InvalidOperationError
from ..services.post_service import PostService, get_post_service

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=List[Post])
async def list_posts(service: PostService = Depends(get_post_service)):
    return await service.list_posts()


@router.get("/{post_id}", response_model=Post)
async def get_post(post_id: str, service: PostService = Depends(get_post_service)):
    post = await service.get_post(post_id)
    if not post:
        raise HTTPException(status_code=404, detail="post not found")
    return post


@router.post("", response_model=Post, status_code=status.HTTP_201_CREATED)
async def create_post(payload: PostCreateRequest, service: PostService = Depends(get_post_service)):
    try:
        return await service.create_post(payload)
    except (InvalidOperationError, RepositoryError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


@router.patch("/{post_id}", response_model=Post)
async def update_post(
    post_id: str,
    patch: PostPatch,
    service: PostService = Depends(get_post_service),
):
    try:
        return await service.update_post(post_id, patch)
    except NotFoundRepositoryError:
        raise HTTPException(status_code=404, detail="post not found") from None
    except (InvalidOperationError, RepositoryError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


@router.delete("/{post_id}", response_model=Post)
async def delete_post(post_id: str, service: PostService = Depends(get_post_service)):
    try:
        return await service.delete_post(post_id)
    except NotFoundRepositoryError:
        raise HTTPException(status_code=404, detail="post not found") from None
    except (InvalidOperationError, RepositoryError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


__all__ = ["router"]
