"""
Configuration for the Growth Planner Dashboard
===============================================
Defines planner parameters that can be easily modified for different scenarios.
Values can be overridden at start-up from a JSON file (see apply_overrides).
"""

import json
import logging
import os

log = logging.getLogger(__name__)


# ============ GROWTH PLANNER PARAMETERS ============
class PlannerConfig:
    """Defaults and input ranges for the compound-growth planner"""

    # Starting inputs shown in the account snapshot
    DEFAULT_BALANCE = 100.0
    DEFAULT_DAYS = 300
    DEFAULT_DAILY_TARGET_PCT = 0.03   # 3% / day
    DEFAULT_RISK_PER_TRADE_PCT = 0.05  # 5% per trade, 1:1 R:R

    # Rounding: running balance carried at 8 dp, shown at cent precision
    INTERNAL_PLACES = 8
    DISPLAY_PLACES = 2

    # Slider ranges (fractions, not percent)
    DAILY_TARGET_MIN = 0.001
    DAILY_TARGET_MAX = 0.2
    DAILY_TARGET_STEP = 0.001
    RISK_MIN = 0.01
    RISK_MAX = 0.2
    RISK_STEP = 0.005

    # Simulation length limits for the UI
    MIN_DAYS = 1
    MAX_DAYS = 3650

    # Trade-tools table only shows the first N days
    TABLE_ROW_LIMIT = 100


# ============ EXPORT PARAMETERS ============
class ExportConfig:
    """Parameters for CSV export of the balance timeline"""

    CSV_FILENAME = "compound_simulation.csv"
    CSV_COLUMNS = ["day", "balance"]
    CSV_MIME = "text/csv"


# ============ BETTING PLANNER PARAMETERS ============
class TicketConfig:
    """Parameters for the demo accumulator-ticket generator"""

    # Demo fixtures: outcome name -> model probability
    MOCK_MATCHES = [
        {"home": "Team A", "away": "Team B",
         "options": [{"name": "1", "prob": 0.58}, {"name": "X", "prob": 0.22}, {"name": "2", "prob": 0.20}]},
        {"home": "Team C", "away": "Team D",
         "options": [{"name": "1", "prob": 0.35}, {"name": "X", "prob": 0.25}, {"name": "2", "prob": 0.40}]},
        {"home": "Team E", "away": "Team F",
         "options": [{"name": "1", "prob": 0.20}, {"name": "X", "prob": 0.30}, {"name": "2", "prob": 0.50}]},
    ]

    DEFAULT_TICKETS = 5
    DEFAULT_SELECTIONS = 12

    # Initial set shown on first load vs. "Generate Tickets" button
    INITIAL_TICKETS = 6
    GENERATED_TICKETS = 8
    SELECTIONS_PER_TICKET = 6

    # Chance of taking the second favourite instead of the favourite
    UPSET_CHANCE = 0.2


# ============ COLORING BOOK PARAMETERS ============
class ColoringConfig:
    """Parameters for the number-to-color SVG generator"""

    PALETTE = ["#fef3c7", "#fde68a", "#fb923c", "#f97316", "#c2410c"]
    CANVAS_PX = 640
    STROKE = "#111"
    STROKE_WIDTH = 0.02

    DEFAULT_GRID = 8
    DASHBOARD_GRID = 16
    LANDMARK_GRID = 24


# ============ CHAT PARAMETERS ============
class ChatConfig:
    """Mock chat panel (no real AI backend)"""

    WELCOME = "Welcome to Project Change Lives, built for traders, creators & small-business owners."
    DEMO_REPLY = (
        "Demo reply: consider 2-3 trades/day with strict stops. "
        "Connect your LLM backend for live advice."
    )
    REPLY_DELAY_SECONDS = 0.6
    PLACEHOLDER = "Ask about trading, bets, or business..."


# ============ CREATOR TOOLKIT PARAMETERS ============
class CreatorConfig:
    """Static VA business starter kit shown in the Creator tab"""

    OUTREACH_SUBJECT = "Remote VA support: 2 years experience, ready to help your team"
    PRICING_TIERS = [
        ("Starter", "$150/mo (10 hrs)"),
        ("Growth", "$400/mo (35 hrs)"),
        ("Scale", "custom"),
    ]


_SECTIONS = {
    "PlannerConfig": PlannerConfig,
    "ExportConfig": ExportConfig,
    "TicketConfig": TicketConfig,
    "ColoringConfig": ColoringConfig,
    "ChatConfig": ChatConfig,
    "CreatorConfig": CreatorConfig,
}


def apply_overrides(path) -> bool:
    """
    Patch config classes from a JSON file.

    Expected layout: {"PlannerConfig": {"DEFAULT_DAYS": 120}, ...}
    Only attributes that already exist are overwritten.

    Args:
        path: Path to the JSON file

    Returns:
        bool: True if the file existed and was applied
    """
    if not os.path.exists(path):
        return False

    with open(path, encoding="utf-8") as f:
        overrides = json.load(f)

    for section, values in overrides.items():
        target = _SECTIONS.get(section)
        if target is None:
            log.warning("Unknown config section in %s: %s", path, section)
            continue
        for key, value in values.items():
            if not hasattr(target, key):
                log.warning("Unknown key %s.%s in %s", section, key, path)
                continue
            setattr(target, key, value)
            log.info("Config override %s.%s = %r", section, key, value)

    return True
