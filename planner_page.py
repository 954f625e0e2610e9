import streamlit as st

from config import PlannerConfig, TicketConfig, ColoringConfig


def render_planner_page() -> None:
    if st.button("← Back to Dashboard"):
        st.session_state["show_method_page"] = False
        st.rerun()

    st.title("How the Planner Works")

    st.markdown(
        """
This page explains the numbers behind each tool on the dashboard. Everything here is a
deterministic toy model for planning and demos, not trading or betting advice.
"""
    )

    st.markdown("---")

    st.header("1️⃣ Compound growth simulator")
    st.markdown(f"""
    The balance is multiplied by **(1 + daily target)** once per simulated day.

    - The running balance is kept at **{PlannerConfig.INTERNAL_PLACES} decimal places** between days.
    - Each day shown in the chart, table and CSV is rounded to **{PlannerConfig.DISPLAY_PLACES} decimals**.
    - Rounding for display never feeds back into the next day, so cents do not drift over long runs.

    | Start | Daily target | Day 1 | Day 2 | Day 3 |
    |---|---|---|---|---|
    | $100.00 | 1% | $101.00 | $102.01 | $103.03 |

    A zero target gives a flat line; a negative balance compounds towards more negative values.
    """)

    st.header("2️⃣ Trades needed per day")
    st.markdown("""
    **Formula:** ceil( (daily target × balance) / (risk per trade × balance) )

    - Assumes a **1:1 reward-to-risk** ratio: every winning trade makes what was risked.
    - Assumes **every trade wins**. Real results need far more trades, or fewer with losses.
    - If a single trade cannot make a profit (balance or risk at zero), the answer is **∞**:
      no number of trades reaches the target.

    Example: 3% target, 5% risk on $100 → $3 needed, $5 per win → **1 trade/day**.
    """)

    st.header("3️⃣ Betting planner (demo)")
    st.markdown(f"""
    Tickets are built from mock fixtures. Each ticket shuffles the matches, backs the
    highest-probability outcome, and with a **{TicketConfig.UPSET_CHANCE:.0%}** chance swaps in the
    second favourite for variety. Probabilities are invented; nothing is connected to a bookmaker.
    """)

    st.header("4️⃣ Number-to-color book builder")
    st.markdown(f"""
    Cell (x, y) gets color number **((x + 1) × (y + 2)) mod {len(ColoringConfig.PALETTE)}** from a
    {len(ColoringConfig.PALETTE)}-color palette. The SVG is {ColoringConfig.CANVAS_PX}×{ColoringConfig.CANVAS_PX}
    px and scales cleanly for printing.
    """)

    st.header("5️⃣ AI chat")
    st.markdown("""
    The chat panel is a placeholder. It answers every message with the same demo reply after a short
    delay. Connect an LLM endpoint to make it useful.
    """)
