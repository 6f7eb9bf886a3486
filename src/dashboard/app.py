"""Streamlit dashboard: ``streamlit run src/dashboard/app.py``."""
import pathlib
from datetime import datetime

import streamlit as st

from src.app.logging import configure_logging
from src.app.schemas import AnalysisResult
from src.app.settings import dashboard_settings
from src.dashboard.client import AnalysisClient
from src.dashboard.history import AnalysisHistory
from src.dashboard.ratings import rating_style, section_title
from src.dashboard.state import DashboardState

# ----------------- CONFIG -----------------
st.set_page_config(page_title="Sequoia Advisor Group", layout="wide", page_icon="📈")

st.markdown("""
    <style>
    .rating-badge {
        display: inline-block;
        padding: 4px 12px;
        border-radius: 999px;
        color: white;
        font-weight: 600;
    }
    </style>
    """, unsafe_allow_html=True)

# ----------------- SESSION ----------------
if "dashboard" not in st.session_state:
    configure_logging()
    st.session_state.dashboard = DashboardState(
        client=AnalysisClient(),
        history=AnalysisHistory.load(
            pathlib.Path(dashboard_settings.history_file), dashboard_settings.history_limit
        ),
    )
state: DashboardState = st.session_state.dashboard


def _format_date(value):
    if not value:
        return "N/A"
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime("%Y-%m-%d")
    except ValueError:
        return value


def _badge(recommendation):
    colour, icon = rating_style(recommendation)
    label = recommendation or "N/A"
    return f"<span class='rating-badge' style='background-color: {colour}'>{icon} {label}</span>"


# ----------------- SIDEBAR ----------------
with st.sidebar:
    st.title("📈 Sequoia Advisor Group")
    st.caption("Proprietary Equity Research Agent")

    with st.form("ticker_form"):
        ticker = st.text_input("Ticker Symbol", placeholder="e.g., NVDA").strip().upper()
        run_btn = st.form_submit_button("Run Analysis", type="primary", use_container_width=True)

    if state.client.check_health():
        st.success("Backend online")
    else:
        st.warning(f"Backend unreachable at {state.client.base_url}")

    st.markdown("---")
    st.subheader(f"History ({len(state.history)})")
    for index, entry in enumerate(state.history):
        item = AnalysisResult.from_payload(entry)
        label = f"{item.ticker or '?'} · {item.executive_summary.recommendation or 'N/A'} · {_format_date(item.created_at)}"
        if entry.get("is_placeholder"):
            label += " · placeholder"
        if st.button(label, key=f"history-{index}", use_container_width=True):
            state.select(entry)

# ----------------- MAIN LOGIC ----------------
if run_btn and ticker:
    with st.spinner(f"🔍 Analyzing {ticker}..."):
        outcome = state.run_analysis(ticker)
    if outcome.kind == "failed":
        st.error(f"❌ Analysis failed: {outcome.error}")

if state.last_outcome is not None and state.last_outcome.kind == "degraded":
    st.warning(
        "⚠️ The research backend failed, so the analysis below is an illustrative placeholder, "
        f"not real research. ({state.last_outcome.error})"
    )

if state.current:
    analysis = AnalysisResult.from_payload(state.current)
    summary = analysis.executive_summary

    st.markdown(f"## {analysis.ticker or 'Unknown ticker'}")
    st.markdown(
        f"{_badge(summary.recommendation)} &nbsp; Conviction: {summary.conviction_level or 'N/A'}"
        f" &nbsp; {analysis.analysis_date or _format_date(analysis.created_at)}",
        unsafe_allow_html=True,
    )

    view = st.radio(
        "View",
        ["summary", "detailed"],
        index=0 if state.view_mode == "summary" else 1,
        format_func=str.capitalize,
        horizontal=True,
    )
    state.view_mode = view

    if state.view_mode == "summary":
        kpi1, kpi2, kpi3 = st.columns(3)
        kpi1.metric("Current Price", f"${summary.current_price}" if summary.current_price else "N/A")
        kpi2.metric("Target Price", f"${summary.target_price}" if summary.target_price else "N/A")
        kpi3.metric("Time Horizon", summary.time_horizon or "N/A")

        st.markdown("### Key Thesis")
        st.write(summary.key_thesis or "No thesis provided.")

        col_cat, col_risk = st.columns(2)
        with col_cat:
            st.markdown("### Primary Catalysts")
            for catalyst in summary.primary_catalysts:
                st.markdown(f"- {catalyst}")
        with col_risk:
            st.markdown("### Key Risks")
            for risk in summary.key_risks:
                st.markdown(f"- {risk}")
    else:
        sections = analysis.detailed_analysis.sections()
        if not sections:
            st.info("No detailed analysis available.")
        for key, content in sections.items():
            st.markdown(f"### {section_title(key)}")
            st.write(content)
else:
    st.markdown("### Welcome to Sequoia Advisor Group Research")
    st.markdown("""
    Enter a ticker symbol to generate institutional-grade equity analysis
    with contrarian insights and alpha generation opportunities.

    **Analysis Framework:**
    - Multi-dimensional fundamental analysis
    - Contrarian thinking & bias detection
    - Competitive positioning assessment
    - Risk-adjusted valuation models
    - Alpha generation opportunities
    """)
