"""CORS handling that stamps the same headers on every response.

Unlike Starlette's CORSMiddleware this answers every OPTIONS request directly
and always sends the configured origin, with or without an Origin header.
"""
from fastapi import FastAPI, Request, Response

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOWED_HEADERS = "Origin, X-Requested-With, Content-Type, Accept, Authorization"


def cors_headers(allow_origin: str = "*") -> dict:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Access-Control-Allow-Credentials": "true",
    }


def add_cors(app: FastAPI, allow_origin: str = "*") -> None:
    headers = cors_headers(allow_origin)

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            print("✅ CORS preflight request handled")
            return Response(status_code=200, content="OK", headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response
