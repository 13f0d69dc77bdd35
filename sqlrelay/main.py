# sqlrelay/main.py
import logging
import sys

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel
from .config import settings
from .errors import RelayError
from .nl2sql import generate_sql

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

# Sent on every response so a browser page on another origin can call us
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

app = FastAPI(title="NL2SQL Relay")

class ConversionRequest(BaseModel):
    query: str

class ConversionResponse(BaseModel):
    sql: str

class ErrorResponse(BaseModel):
    error: str
    code: str

def error_response(status_code: int, message: str, code: str) -> JSONResponse:
    body = ErrorResponse(error=message, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump())

@app.middleware("http")
async def cors_headers(request: Request, call_next):
    # preflight: answer before any routing, body parsing or key lookup
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)
    try:
        response = await call_next(request)
    except Exception as e:
        logger.exception("Unhandled error for %s %s", request.method, request.url.path)
        response = error_response(500, str(e) or "Unknown error", "internal_error")
    response.headers.update(CORS_HEADERS)
    return response

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post(
    "/convert-to-sql",
    response_model=ConversionResponse,
    responses={
        402: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def convert_to_sql(request: Request):
    try:
        # parsed by hand so malformed JSON lands in the generic 500 below
        payload = ConversionRequest.model_validate(await request.json())
        sql = await generate_sql(payload.query)
        body = ConversionResponse(sql=sql)
    except RelayError as e:
        logger.error("Error in convert-to-sql: %s", e.message)
        return error_response(e.status_code, e.message, e.code)
    except Exception as e:
        logger.exception("Error in convert-to-sql")
        return error_response(500, str(e) or "Unknown error", "internal_error")

    return body
