import logging

from functools import lru_cache
from typing import Optional
from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

import backend.config as config
from backend.constants import SERVICE_ROUTE
from backend.errors import GatewayError, InvalidInput
from backend.gemini import ReviewGateway

@lru_cache
def get_settings():
    return config.Settings()

settings = get_settings()

@lru_cache
def get_gateway() -> ReviewGateway:
    return ReviewGateway.from_settings(get_settings())

app = FastAPI(
    title="Code Review Gateway",
    description="Forwards code snippets to Gemini and returns a markdown review.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    allow_headers=["Content-Type", "Authorization"],
)


class ReviewRequest(BaseModel):
    code: Optional[str] = Field(None, description="The code snippet to be reviewed.")

class ReviewResult(BaseModel):
    text: str = Field(..., description="Markdown review returned by the model.")


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logging.exception("Unhandled error")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )


router = APIRouter()

@router.post(SERVICE_ROUTE, response_model=ReviewResult, tags=["Review"])
async def get_service(request_data: ReviewRequest):
    if request_data.code is None:
        raise InvalidInput("code is required")

    try:
        gateway = get_gateway()
    except Exception as e:
        logging.error(f"Failed to initialize Gemini client: {e}")
        raise HTTPException(
            status_code=503,
            detail="Gemini client is not initialized. Ensure GEMINI_API_KEY is set.",
        )

    text = await gateway.review(request_data.code)
    return ReviewResult(text=text)

app.include_router(router, prefix=settings.API_PREFIX)


@app.get("/", response_class=PlainTextResponse, tags=["Health"])
async def health():
    return "Server is running!"
