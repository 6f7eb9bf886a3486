"""Error taxonomy for the analysis proxy.

Each error knows the HTTP status it maps to and the JSON body the client
receives. The service layer raises these; the FastAPI exception handlers in
``src.app.main`` turn them into responses.
"""
from typing import Any, Dict


class AnalysisError(Exception):
    status_code: int = 500
    error: str = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.error)

    def body(self) -> Dict[str, Any]:
        return {"error": self.error}


class InvalidRequest(AnalysisError):
    status_code = 400
    error = "Missing ticker or research prompt"


class ConfigurationError(AnalysisError):
    error = "API key not configured. Set ANTHROPIC_API_KEY."


class UpstreamError(AnalysisError):
    """Non-success status from the Anthropic API, passed through untouched."""

    def __init__(self, status_code: int, details: str):
        self.status_code = status_code
        self.details = details
        super().__init__(f"Anthropic API error: {status_code}")

    def body(self) -> Dict[str, Any]:
        return {"error": f"Anthropic API error: {self.status_code}", "details": self.details}


class MalformedUpstreamResponse(AnalysisError):
    error = "Invalid response structure from Anthropic API"


class ResultParseError(AnalysisError):
    error = "Failed to parse analysis result as JSON"
    raw_limit = 500

    def __init__(self, raw_text: str):
        self.raw_response = raw_text[: self.raw_limit]
        super().__init__(self.error)

    def body(self) -> Dict[str, Any]:
        return {"error": self.error, "rawResponse": self.raw_response}


class InternalError(AnalysisError):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def body(self) -> Dict[str, Any]:
        return {"error": self.error, "message": self.message}
