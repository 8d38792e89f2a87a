"""Route class that sends every handler failure through the error translator."""

from typing import Callable, Coroutine, Any

from fastapi import Request, Response
from fastapi.routing import APIRoute

from presentation.api.error_handlers import translate_error


class TranslatingRoute(APIRoute):
    """
    APIRoute whose handler never lets an exception escape.
    
    Body decoding and parameter validation happen inside the wrapped
    handler, so malformed requests are translated here as well.
    """
    
    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        route_handler = super().get_route_handler()
        
        async def translating_route_handler(request: Request) -> Response:
            try:
                return await route_handler(request)
            except Exception as exc:
                return translate_error(exc, request)
        
        return translating_route_handler
