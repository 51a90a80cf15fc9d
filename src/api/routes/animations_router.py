# src/api/routes/animations_router.py
from typing import List, Optional

from fastapi import APIRouter, Query

from showcase.animation.scroll_timeline import Timeline, build_scroll_timelines, is_mobile_viewport

router = APIRouter(prefix="/animations", tags=["Animations"])


@router.get("/", response_model=List[Timeline], response_model_by_alias=True)
async def scroll_timelines(
    cards: int = Query(default=0, ge=0),
    mobile: bool = False,
    width: Optional[int] = Query(default=None, ge=0, description="viewport width (px)"),
):
    # width가 주어지면 breakpoint로 mobile 여부 판단
    if width is not None:
        mobile = is_mobile_viewport(width)
    return build_scroll_timelines(card_count=cards, is_mobile=mobile)
