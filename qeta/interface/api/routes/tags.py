"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from qeta.application.usecase.tag import ListTagsUseCase

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=list[str])
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> list[str]:
    """List every known tag name, sorted."""
    return await use_case.execute()
