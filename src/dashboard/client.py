"""HTTP client the dashboard uses to talk to the analysis proxy."""
import logging
from typing import Any, Dict, Literal, Optional, Union

import httpx
from pydantic import BaseModel

from src.app.settings import dashboard_settings
from src.dashboard.placeholder import build_placeholder
from src.prompts.research_prompt import build_research_prompt

logger = logging.getLogger(__name__)


class ProxyError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class Ok(BaseModel):
    kind: Literal["ok"] = "ok"
    result: Dict[str, Any]


class Degraded(BaseModel):
    """The proxy call failed and a placeholder stands in for the real result."""

    kind: Literal["degraded"] = "degraded"
    result: Dict[str, Any]
    error: str


class Failed(BaseModel):
    kind: Literal["failed"] = "failed"
    error: str


AnalysisOutcome = Union[Ok, Degraded, Failed]


class AnalysisClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        fallback_to_placeholder: Optional[bool] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or dashboard_settings.api_url).rstrip("/")
        if "://" not in self.base_url:
            self.base_url = f"https://{self.base_url}"
        self.timeout = timeout or dashboard_settings.request_timeout
        self.fallback_to_placeholder = (
            dashboard_settings.fallback_to_placeholder
            if fallback_to_placeholder is None
            else fallback_to_placeholder
        )
        self.client = httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=transport)

    def request_analysis(self, ticker: str) -> Dict[str, Any]:
        """POST the research prompt for ``ticker`` and return the proxy's JSON."""
        symbol = ticker.strip().upper()
        payload = {"ticker": symbol, "researchPrompt": build_research_prompt(symbol)}
        try:
            response = self.client.post("/api/analyze", json=payload)
        except httpx.HTTPError as exc:
            raise ProxyError(f"Backend unreachable: {exc}") from exc

        logger.info("Backend response status: %s", response.status_code)
        if not response.is_success:
            try:
                body = response.json()
            except ValueError:
                body = {}
            detail = body.get("error", "Unknown error") if isinstance(body, dict) else "Unknown error"
            raise ProxyError(
                f"Backend error: {response.status_code} - {detail}", status_code=response.status_code
            )
        try:
            result = response.json()
        except ValueError as exc:
            raise ProxyError("Backend returned invalid JSON") from exc
        if not isinstance(result, dict):
            raise ProxyError("Backend returned a non-object analysis")
        return result

    def run_analysis(self, ticker: str) -> AnalysisOutcome:
        if not ticker or not ticker.strip():
            return Failed(error="Ticker is required")

        logger.info("Starting analysis for: %s", ticker.strip().upper())
        try:
            return Ok(result=self.request_analysis(ticker))
        except ProxyError as exc:
            logger.error("Analysis failed: %s", exc)
            if not self.fallback_to_placeholder:
                return Failed(error=str(exc))
            logger.warning("Using placeholder analysis for %s", ticker.strip().upper())
            return Degraded(result=build_placeholder(ticker), error=str(exc))

    def check_health(self) -> bool:
        try:
            response = self.client.get("/health")
        except httpx.HTTPError as exc:
            logger.warning("Health check failed: %s", exc)
            return False
        return response.status_code == 200

    def close(self):
        self.client.close()
