from fastapi import Request, Response
from .config import get_settings


ALLOW_METHODS = "GET, POST, OPTIONS"
ALLOW_HEADERS = "Content-Type"


def cors_headers(settings=None) -> dict:
    settings = settings or get_settings()
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }


async def cors_middleware(request: Request, call_next):
    # Simple CORS headers with no conditions, preflights never reach a route
    # same Settings the routes get through Depends, overrides included
    resolve = request.app.dependency_overrides.get(get_settings, get_settings)
    headers = cors_headers(resolve())

    if request.method == "OPTIONS":
        return Response(content="OK", status_code=200, headers=headers, media_type="text/plain")

    response = await call_next(request)
    response.headers.update(headers)
    return response
