import json
import pathlib

import httpx
import pytest
from streamlit.testing.v1 import AppTest

from src.dashboard.client import AnalysisClient, Degraded
from src.dashboard.history import AnalysisHistory
from src.dashboard.placeholder import build_placeholder
from src.dashboard.state import DashboardState

APP_PATH = str(pathlib.Path(__file__).resolve().parents[1] / "src" / "dashboard" / "app.py")


def proxy_handler(request):
    if request.url.path == "/health":
        return httpx.Response(200, json={"status": "Backend is running!"})
    body = json.loads(request.content)
    return httpx.Response(
        200,
        json={
            "id": 7,
            "ticker": body["ticker"],
            "created_at": "2026-10-19T12:00:00.000Z",
            "executive_summary": {"recommendation": "Strong Buy", "key_thesis": "Cheap."},
        },
    )


@pytest.fixture
def dashboard(tmp_path):
    client = AnalysisClient(base_url="http://proxy.test", transport=httpx.MockTransport(proxy_handler))
    return DashboardState(client, AnalysisHistory(tmp_path / "history.json"))


def run_page(dashboard):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.session_state["dashboard"] = dashboard
    return at.run()


def texts(elements):
    return " ".join(str(e.value) for e in elements)


def test_landing_page(dashboard):
    at = run_page(dashboard)
    assert not at.exception
    assert "Welcome to Sequoia Advisor Group Research" in texts(at.markdown)
    assert "Backend online" in texts(at.success)


@pytest.mark.parametrize("view_mode", ["summary", "detailed"])
@pytest.mark.parametrize(
    "payload",
    [
        {"ticker": "NVDA", "executive_summary": None, "detailed_analysis": None},
        {"ticker": "NVDA", "detailed_analysis": {"financial_analysis": {"revenue_growth": "28%"}}},
        {"ticker": "NVDA", "executive_summary": {"primary_catalysts": "AI demand", "key_risks": None}},
        {"ticker": "NVDA", "executive_summary": {"conviction_level": 8, "target_price": 950.5}},
        {"ticker": "NVDA", "executive_summary": "Buy", "created_at": 1760000000},
        {"id": "abc", "ticker": 123, "detailed_analysis": {"alpha_thesis": ["one", "two"]}},
    ],
)
def test_off_template_results_render(dashboard, payload, view_mode):
    dashboard.current = payload
    dashboard.history.add(payload)
    dashboard.view_mode = view_mode

    at = run_page(dashboard)

    assert not at.exception
    assert at.radio[0].value == view_mode


def test_degraded_result_shows_warning(dashboard):
    placeholder = build_placeholder("tsla")
    dashboard.current = placeholder
    dashboard.last_outcome = Degraded(result=placeholder, error="Backend error: 502 - bad gateway")

    at = run_page(dashboard)

    assert not at.exception
    warning = texts(at.warning)
    assert "illustrative placeholder" in warning
    assert "502" in warning


def test_submitting_ticker_runs_analysis(dashboard):
    at = run_page(dashboard)
    at.text_input[0].input("nvda")
    next(b for b in at.button if b.label == "Run Analysis").click()
    at.run()

    assert not at.exception
    assert dashboard.current["ticker"] == "NVDA"
    assert len(dashboard.history) == 1
    assert "## NVDA" in texts(at.markdown)
    assert not next(b for b in at.button if b.label == "Run Analysis").disabled


def test_history_entries_without_ids_render_and_select(dashboard):
    dashboard.history.add({"ticker": "AAPL", "executive_summary": {"recommendation": "Hold"}})
    dashboard.history.add({"ticker": "MSFT", "executive_summary": {"recommendation": "Sell"}})
    dashboard.current = dashboard.history.entries[0]
    dashboard.view_mode = "detailed"

    at = run_page(dashboard)
    assert not at.exception
    assert at.radio[0].value == "detailed"

    at.button(key="history-1").click()
    at.run()

    assert not at.exception
    assert dashboard.current["ticker"] == "AAPL"
    assert dashboard.view_mode == "summary"
    assert at.radio[0].value == "summary"
