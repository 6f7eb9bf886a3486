"""UI state for the dashboard, kept free of Streamlit so it can be tested."""
import logging
from typing import Any, Dict, Literal, Optional

from src.dashboard.client import AnalysisClient, AnalysisOutcome, Failed
from src.dashboard.history import AnalysisHistory

logger = logging.getLogger(__name__)

ViewMode = Literal["summary", "detailed"]


class DashboardState:
    def __init__(self, client: AnalysisClient, history: AnalysisHistory):
        self.client = client
        self.history = history
        self.current: Optional[Dict[str, Any]] = None
        self.last_outcome: Optional[AnalysisOutcome] = None
        self.view_mode: ViewMode = "summary"
        self.analyzing = False

    def run_analysis(self, ticker: str) -> AnalysisOutcome:
        # Only guards the UI against double submission.
        if self.analyzing:
            return Failed(error="An analysis is already running")

        self.analyzing = True
        self.current = None
        try:
            outcome = self.client.run_analysis(ticker)
        finally:
            self.analyzing = False

        self.last_outcome = outcome
        if outcome.kind != "failed":
            self.current = outcome.result
            self.history.add(outcome.result)
        return outcome

    def select(self, entry: Dict[str, Any]) -> None:
        self.current = entry
        self.last_outcome = None
        self.view_mode = "summary"

    def select_by_id(self, entry_id: int) -> bool:
        entry = self.history.get(entry_id)
        if entry is None:
            return False
        self.select(entry)
        return True
