import json

import config
from config import PlannerConfig, ChatConfig


def test_missing_override_file_is_ignored(tmp_path):
    assert config.apply_overrides(str(tmp_path / "nope.json")) is False


def test_overrides_apply_and_skip_unknown(tmp_path):
    path = tmp_path / "planner_settings.json"
    path.write_text(json.dumps({
        "PlannerConfig": {"DEFAULT_DAYS": 120, "NOT_A_SETTING": 1},
        "ChatConfig": {"REPLY_DELAY_SECONDS": 0},
        "UnknownConfig": {"X": 1},
    }))

    old_days, old_delay = PlannerConfig.DEFAULT_DAYS, ChatConfig.REPLY_DELAY_SECONDS
    try:
        assert config.apply_overrides(str(path)) is True
        assert PlannerConfig.DEFAULT_DAYS == 120
        assert ChatConfig.REPLY_DELAY_SECONDS == 0
        assert not hasattr(PlannerConfig, "NOT_A_SETTING")
    finally:
        PlannerConfig.DEFAULT_DAYS = old_days
        ChatConfig.REPLY_DELAY_SECONDS = old_delay


def test_defaults():
    assert PlannerConfig.DEFAULT_BALANCE == 100.0
    assert PlannerConfig.DEFAULT_DAILY_TARGET_PCT == 0.03
    assert PlannerConfig.DEFAULT_RISK_PER_TRADE_PCT == 0.05
    assert PlannerConfig.INTERNAL_PLACES == 8
    assert PlannerConfig.DISPLAY_PLACES == 2


def test_overrides_reach_modules_imported_earlier(tmp_path):
    from decimal import Decimal
    import xml.etree.ElementTree as ET

    from chat import ChatSession
    from coloring import number_to_color_svg
    from config import ColoringConfig, TicketConfig
    from growth_planner import project
    from tickets import generate_accumulator_tickets, load_matches

    path = tmp_path / "planner_settings.json"
    path.write_text(json.dumps({
        "ChatConfig": {"REPLY_DELAY_SECONDS": 0, "WELCOME": "hi"},
        "PlannerConfig": {"INTERNAL_PLACES": 2},
        "TicketConfig": {"DEFAULT_TICKETS": 2},
        "ColoringConfig": {"DEFAULT_GRID": 3},
    }))

    saved = (ChatConfig.REPLY_DELAY_SECONDS, ChatConfig.WELCOME, PlannerConfig.INTERNAL_PLACES,
             TicketConfig.DEFAULT_TICKETS, ColoringConfig.DEFAULT_GRID)
    try:
        config.apply_overrides(str(path))

        session = ChatSession()
        assert session.reply_delay == 0
        assert session.messages[0].text == "hi"

        # 2 dp carry: 1.004 is cut to 1.00 each day, so the balance never moves (8 dp gives 1.00, 1.01, 1.01)
        balances = [p.balance for p in project(1, 0.004, 3)]
        assert balances == [Decimal("1.00"), Decimal("1.00"), Decimal("1.00")]

        assert len(generate_accumulator_tickets(load_matches(TicketConfig.MOCK_MATCHES), rng=0)) == 2

        root = ET.fromstring(number_to_color_svg())
        assert root.attrib["viewBox"] == "0 0 3 3"
    finally:
        (ChatConfig.REPLY_DELAY_SECONDS, ChatConfig.WELCOME, PlannerConfig.INTERNAL_PLACES,
         TicketConfig.DEFAULT_TICKETS, ColoringConfig.DEFAULT_GRID) = saved
