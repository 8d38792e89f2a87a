"""Plain-text greeting endpoints."""

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from presentation.api.routing import TranslatingRoute

router = APIRouter(tags=["greetings"], route_class=TranslatingRoute)


@router.get("/hello", response_class=PlainTextResponse)
async def hello() -> str:
    """Say hello."""
    return "Hello, World!"


@router.get("/greet", response_class=PlainTextResponse)
async def greet(name: str = Query("Guest", min_length=1, max_length=100)) -> str:
    """Greet the caller by name, or as a guest."""
    return f"Hello, {name}!"
