import logging
from typing import Iterator

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.analysis.service import analyze
from src.app.errors import AnalysisError, InternalError, InvalidRequest
from src.app.logging import configure_logging
from src.app.schemas import AnalyzeRequest, HealthResponse
from src.app.settings import settings
from src.inference.anthropic_client import AnthropicClient

configure_logging(settings.log_level)

app = FastAPI(title="Equity Research Proxy")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def report_configuration():
    """Never falls back to a built-in key: requests fail until one is set."""
    logger.info("Analysis endpoint: http://%s:%s/api/analyze", settings.host, settings.port)
    if settings.anthropic_api_key:
        logger.info("API Key configured: Yes")
    else:
        logger.warning("API Key configured: No (set ANTHROPIC_API_KEY)")


def get_anthropic_client() -> Iterator[AnthropicClient]:
    client = AnthropicClient.from_settings()
    try:
        yield client
    finally:
        client.close()


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    return JSONResponse(status_code=exc.status_code, content=exc.body())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected malformed analysis request: %s", exc.errors())
    err = InvalidRequest()
    return JSONResponse(status_code=err.status_code, content=err.body())


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse()


@app.post("/api/analyze")
def analyze_ticker(
    payload: AnalyzeRequest,
    client: AnthropicClient = Depends(get_anthropic_client),
):
    try:
        return analyze(payload, client)
    except AnalysisError:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("analyze handler failed")
        raise InternalError(str(exc))


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
