"""
Project Change Lives - Planner Dashboard
=========================================
Compound growth simulator, trades-needed estimator, betting planner demo,
coloring-book SVG generator, VA toolkit and a mock AI chat, in one page.
"""

import asyncio
import logging
import os
import sys

import streamlit as st
import plotly.graph_objects as go

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config as _cfg
from config import PlannerConfig, ExportConfig, TicketConfig, ColoringConfig, ChatConfig, CreatorConfig
from growth_planner import GrowthPlanner, format_trades_needed, trades_needed
from tickets import load_matches, generate_accumulator_tickets, tickets_frame
from coloring import number_to_color_svg, svg_data_uri
from chat import ChatSession

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("dashboard")

# Apply local settings from planner_settings.json if available
_settings_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "planner_settings.json")
_SETTINGS_LOADED = _cfg.apply_overrides(_settings_path)

# Page config
st.set_page_config(
    page_title="Project Change Lives",
    page_icon="CL",
    layout="wide",
    initial_sidebar_state="collapsed"
)

st.markdown(
    """
<style>
section[data-testid="stSidebar"] {
    display: none !important;
}
.stButton > button, .stDownloadButton > button {
    background-color: #34d399;
    color: #0f172a;
    border: 1px solid #10b981;
    border-radius: 6px;
    font-weight: 600;
}
.stButton > button:hover, .stDownloadButton > button:hover {
    background-color: #10b981;
    color: #0f172a;
}
h3 {
    font-weight: 600;
    padding: 8px 16px !important;
    border-radius: 6px;
    border: 1px solid #334155;
    margin: 8px 0 6px 0;
}
</style>
""",
    unsafe_allow_html=True,
)


@st.cache_data
def build_plan(balance, daily_target_pct, risk_per_trade_pct, days):
    """Run the projection once per distinct input set."""
    planner = GrowthPlanner.from_values(balance, daily_target_pct, risk_per_trade_pct, days)
    return {
        "timeline": planner.timeline_frame(),
        "table": planner.plan_table(limit=PlannerConfig.TABLE_ROW_LIMIT),
        "final_balance": float(planner.final_balance()),
        "trades_today": format_trades_needed(planner.trades_needed()),
        "csv": planner.to_csv(),
    }


@st.cache_data
def coloring_svg(grid_size):
    return number_to_color_svg(grid_size)


def _sync_from_snapshot():
    """Snapshot sliders drive the risk planner inputs."""
    st.session_state["planner_target_pct"] = st.session_state["daily_target_pct"]
    st.session_state["planner_risk_pct"] = st.session_state["risk_per_trade_pct"]


def _sync_to_snapshot():
    """Risk planner inputs drive the sliders while they stay in slider range."""
    target = st.session_state["planner_target_pct"]
    risk = st.session_state["planner_risk_pct"]
    if PlannerConfig.DAILY_TARGET_MIN <= target <= PlannerConfig.DAILY_TARGET_MAX:
        st.session_state["daily_target_pct"] = target
    if PlannerConfig.RISK_MIN <= risk <= PlannerConfig.RISK_MAX:
        st.session_state["risk_per_trade_pct"] = risk


def _init_state():
    if "daily_target_pct" not in st.session_state:
        st.session_state["daily_target_pct"] = PlannerConfig.DEFAULT_DAILY_TARGET_PCT
        st.session_state["risk_per_trade_pct"] = PlannerConfig.DEFAULT_RISK_PER_TRADE_PCT
        _sync_from_snapshot()
    if "tickets" not in st.session_state:
        st.session_state["tickets"] = generate_accumulator_tickets(
            load_matches(TicketConfig.MOCK_MATCHES),
            TicketConfig.INITIAL_TICKETS,
            TicketConfig.SELECTIONS_PER_TICKET,
        )
    if "chat" not in st.session_state:
        st.session_state["chat"] = ChatSession()


_init_state()

if st.session_state.get("show_method_page"):
    from planner_page import render_planner_page
    render_planner_page()
    st.stop()

# Header
st.title("Project Change Lives")
st.markdown("Tools for traders, creators & small-business founders")

if st.button("How the planner works →"):
    st.session_state["show_method_page"] = True
    st.rerun()

st.markdown("---")

snapshot_col, main_col = st.columns([1, 3])

# Account snapshot
with snapshot_col:
    st.markdown("### Account Snapshot")
    balance = st.number_input(
        "Balance ($)",
        min_value=0.0,
        value=float(PlannerConfig.DEFAULT_BALANCE),
        step=10.0,
    )
    daily_target_pct = st.slider(
        "Daily target",
        min_value=PlannerConfig.DAILY_TARGET_MIN,
        max_value=PlannerConfig.DAILY_TARGET_MAX,
        step=PlannerConfig.DAILY_TARGET_STEP,
        format="%.3f",
        key="daily_target_pct",
        on_change=_sync_from_snapshot,
    )
    st.markdown(f"{daily_target_pct * 100:.2f}% / day")
    risk_per_trade_pct = st.slider(
        "Risk per trade",
        min_value=PlannerConfig.RISK_MIN,
        max_value=PlannerConfig.RISK_MAX,
        step=PlannerConfig.RISK_STEP,
        format="%.3f",
        key="risk_per_trade_pct",
        on_change=_sync_from_snapshot,
    )
    st.markdown(f"{risk_per_trade_pct * 100:.2f}% per trade")
    days = st.number_input(
        "Simulation length (days)",
        min_value=PlannerConfig.MIN_DAYS,
        max_value=PlannerConfig.MAX_DAYS,
        value=PlannerConfig.DEFAULT_DAYS,
        step=1,
    )

try:
    plan = build_plan(balance, daily_target_pct, risk_per_trade_pct, int(days))
except Exception as e:
    log.exception("Projection failed")
    st.error(f"Problem with inputs: {str(e)}")
    st.stop()

with snapshot_col:
    st.metric("Balance", f"${balance:,.2f}")
    st.download_button(
        "Export CSV",
        data=plan["csv"].encode("utf-8"),
        file_name=ExportConfig.CSV_FILENAME,
        mime=ExportConfig.CSV_MIME,
        use_container_width=True
    )
    if _SETTINGS_LOADED:
        st.caption("Local settings loaded from planner_settings.json")

with main_col:
    tab_dash, tab_trade, tab_bet, tab_creator, tab_chat = st.tabs(
        ["Dashboard", "Trade Tools", "Betting Planner", "Creator Tools", "AI Chat"]
    )

    with tab_dash:
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric(
                f"Projected balance (day {int(days)})",
                f"${plan['final_balance']:,.2f}",
                help=f"Projected using {daily_target_pct * 100:.2f}% daily growth"
            )
        with col2:
            st.metric(
                "Trades needed/day (approx.)",
                plan["trades_today"],
                help="Assumes 1:1 R:R and deterministic wins"
            )
        with col3:
            st.metric("Simulation length", f"{int(days)} days")

        st.markdown("### Balance timeline")
        timeline_df = plan["timeline"]
        fig_timeline = go.Figure()
        fig_timeline.add_trace(go.Scatter(
            x=timeline_df["day"],
            y=timeline_df["balance"],
            mode="lines",
            name="Balance",
            line=dict(color="#34d399", width=2),
        ))
        fig_timeline.update_layout(
            xaxis_title="Day",
            yaxis_title="Balance ($)",
            template="plotly_dark",
            height=320,
            margin=dict(l=20, r=20, t=20, b=20),
        )
        st.plotly_chart(fig_timeline, use_container_width=True)
        st.caption("Tip: export CSV to analyze in Excel or Power BI.")

        col1, col2 = st.columns(2)
        with col1:
            st.markdown("### Quick trade plan")
            st.markdown(
                f"To reach {daily_target_pct * 100:.2f}% daily from ${balance:,.2f}, "
                f"you need approximately:"
            )
            st.markdown(f"## {plan['trades_today']} trades/day")
            st.caption("This is a best-case deterministic estimate. Use strict stops and realistic expectations.")
        with col2:
            st.markdown("### Coloring-book demo")
            svg = coloring_svg(ColoringConfig.DASHBOARD_GRID)
            st.markdown(f"<img src=\"{svg_data_uri(svg)}\" width=\"240\"/>", unsafe_allow_html=True)
            st.download_button(
                "Download SVG",
                data=svg.encode("utf-8"),
                file_name="coloring_book.svg",
                mime="image/svg+xml",
            )

    with tab_trade:
        col1, col2 = st.columns(2)
        with col1:
            st.markdown("### Compound simulator")
            st.markdown(
                f"Starting ${balance:,.2f} | {int(days)} days | {daily_target_pct * 100:.2f}%/day"
            )
            st.dataframe(
                plan["table"],
                hide_index=True,
                use_container_width=True,
                height=320,
                column_config={
                    "day": "Day",
                    "balance": st.column_config.NumberColumn("Balance", format="$%.2f"),
                    "trades_needed": "Trades needed",
                },
            )
        with col2:
            st.markdown("### Risk planner")
            st.markdown("Change risk or target and see required trades instantly.")
            in1, in2 = st.columns(2)
            with in1:
                planner_risk = st.number_input(
                    "Risk per trade",
                    step=0.01,
                    format="%.3f",
                    key="planner_risk_pct",
                    on_change=_sync_to_snapshot,
                )
            with in2:
                planner_target = st.number_input(
                    "Daily target",
                    step=0.01,
                    format="%.3f",
                    key="planner_target_pct",
                    on_change=_sync_to_snapshot,
                )
            planner_trades = format_trades_needed(trades_needed(balance, planner_target, planner_risk))
            st.markdown(
                f"On current balance of ${balance:,.2f}, trades/day ≈ **{planner_trades}**"
            )

    with tab_bet:
        col1, col2 = st.columns(2)
        with col1:
            st.markdown("### Generate accumulator tickets")
            st.markdown("Demo generator that picks high-prob picks and adds small randomness.")
            if st.button("Generate Tickets"):
                st.session_state["tickets"] = generate_accumulator_tickets(
                    load_matches(TicketConfig.MOCK_MATCHES),
                    TicketConfig.GENERATED_TICKETS,
                    TicketConfig.SELECTIONS_PER_TICKET,
                )
        with col2:
            st.markdown("### Tickets")
            st.dataframe(
                tickets_frame(st.session_state["tickets"]),
                hide_index=True,
                use_container_width=True,
                height=320,
                column_config={
                    "ticket": "Ticket",
                    "match": "Match",
                    "pick": "Pick",
                    "confidence_pct": st.column_config.NumberColumn("Confidence", format="%d%%"),
                },
            )

    with tab_creator:
        col1, col2 = st.columns(2)
        with col1:
            st.markdown("### Number-to-Color Book Builder")
            st.markdown("Fast proofs for landmarks, export SVGs for printing.")
            st.download_button(
                "Download Demo SVG",
                data=coloring_svg(ColoringConfig.LANDMARK_GRID).encode("utf-8"),
                file_name="landmark_demo.svg",
                mime="image/svg+xml",
            )
        with col2:
            st.markdown("### VA Business Starter Kit")
            st.markdown("Templates: outreach email, pricing table, service list.")
            st.markdown(f"**Outreach subject:** \"{CreatorConfig.OUTREACH_SUBJECT}\"")
            st.markdown(
                "Pricing suggestion: "
                + ", ".join(f"{name}: {price}" for name, price in CreatorConfig.PRICING_TIERS)
            )

    with tab_chat:
        st.markdown("### AI Chat (Privacy-first)")
        session = st.session_state["chat"]
        for message in session.messages:
            st.markdown(f"<small>{message.sender}</small>", unsafe_allow_html=True)
            st.markdown(message.text)
        with st.form("chat_form", clear_on_submit=True):
            prompt = st.text_input("Message", placeholder=ChatConfig.PLACEHOLDER, label_visibility="collapsed")
            sent = st.form_submit_button("Send")
        if sent and prompt.strip():
            with st.spinner("Thinking..."):
                asyncio.run(session.send(prompt))
            st.rerun()

st.markdown("---")
st.caption("Project Change Lives • Demo prototype: replace mock AI with your LLM endpoint for production")
