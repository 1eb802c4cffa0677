from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.api.templates import render_ads, render_board, render_tv
from app.core.config import settings


router = APIRouter()


@router.get("/display", response_class=HTMLResponse)
def display_page() -> HTMLResponse:
    return HTMLResponse(
        render_board(
            business=settings.BUSINESS_NAME,
            title=settings.BOARD_TITLE,
            subtitle=settings.BOARD_SUBTITLE,
            locale=settings.DISPLAY_LOCALE,
            refresh_seconds=settings.DISPLAY_REFRESH_SECONDS,
        )
    )


@router.get("/ads", response_class=HTMLResponse)
def ads_page() -> HTMLResponse:
    return HTMLResponse(
        render_ads(
            business=settings.BUSINESS_NAME,
            video_url=settings.ADS_VIDEO_URL,
            locale=settings.DISPLAY_LOCALE,
        )
    )


@router.get("/tv", response_class=HTMLResponse)
def tv_page() -> HTMLResponse:
    return HTMLResponse(
        render_tv(
            business=settings.BUSINESS_NAME,
            locale=settings.DISPLAY_LOCALE,
            poll_seconds=settings.TV_POLL_SECONDS,
        )
    )
