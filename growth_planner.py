"""Compound-growth projection and trades-per-day estimation."""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum
from typing import List, Optional, Union

import pandas as pd

from config import PlannerConfig as Config, ExportConfig

log = logging.getLogger(__name__)

_BASE_PRECISION = 28


class TradeEstimate(Enum):
    """
    Non-numeric outcomes of trades_needed.

    UNBOUNDED: a winning trade makes no profit, so no finite number of
    trades reaches the daily target.
    """

    UNBOUNDED = "UNBOUNDED"


UNBOUNDED = TradeEstimate.UNBOUNDED

TradesNeeded = Union[int, TradeEstimate]


def _to_decimal(value, name: str) -> Decimal:
    if isinstance(value, Decimal):
        result = value
    else:
        result = Decimal(str(value))
    if not result.is_finite():
        raise ValueError(f"{name} must be finite, got {value!r}")
    return result


@dataclass(frozen=True)
class GrowthParameters:
    """Inputs for one simulation run."""

    initial_balance: Decimal
    daily_rate_pct: Decimal
    risk_per_trade_pct: Decimal
    days: int

    def __post_init__(self):
        balance = _to_decimal(self.initial_balance, "initial_balance")
        rate = _to_decimal(self.daily_rate_pct, "daily_rate_pct")
        risk = _to_decimal(self.risk_per_trade_pct, "risk_per_trade_pct")

        if balance < 0:
            raise ValueError(f"initial_balance must be >= 0, got {balance}")
        if not 0 < rate <= 1:
            raise ValueError(f"daily_rate_pct must be in (0, 1], got {rate}")
        if not 0 < risk <= 1:
            raise ValueError(f"risk_per_trade_pct must be in (0, 1], got {risk}")
        if isinstance(self.days, bool) or not isinstance(self.days, int) or self.days < 1:
            raise ValueError(f"days must be an integer >= 1, got {self.days!r}")

        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "initial_balance", balance)
        object.__setattr__(self, "daily_rate_pct", rate)
        object.__setattr__(self, "risk_per_trade_pct", risk)


@dataclass(frozen=True)
class TimelinePoint:
    day: int
    balance: Decimal


def project(initial_balance, daily_rate, days: int) -> List[TimelinePoint]:
    """
    Project a balance forward by compounding once per day.

    The running balance is rounded to PlannerConfig.INTERNAL_PLACES after every
    step and each emitted point is rounded again to DISPLAY_PLACES, so display
    rounding never feeds back into the compounding.

    Args:
        initial_balance: Starting balance (negative values allowed)
        daily_rate: Fractional growth per day (0.01 = 1%)
        days: Number of days to simulate, >= 1

    Returns:
        list[TimelinePoint]: Exactly `days` points for days 1..days
    """
    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise ValueError(f"days must be an integer >= 1, got {days!r}")

    balance = _to_decimal(initial_balance, "initial_balance")
    factor = 1 + _to_decimal(daily_rate, "daily_rate")
    factor_digits = len(factor.as_tuple().digits)
    internal_places = Config.INTERNAL_PLACES
    internal_quant = Decimal(1).scaleb(-internal_places)
    display_quant = Decimal(1).scaleb(-Config.DISPLAY_PLACES)

    timeline = []
    with localcontext() as ctx:
        for day in range(1, days + 1):
            # Keep every integer digit: product needs digits(balance) + digits(factor)
            ctx.prec = max(
                _BASE_PRECISION,
                balance.adjusted() + 1 + internal_places + factor_digits + 2,
            )
            balance = (balance * factor).quantize(internal_quant, rounding=ROUND_HALF_UP)
            timeline.append(
                TimelinePoint(day=day, balance=balance.quantize(display_quant, rounding=ROUND_HALF_UP))
            )

    log.debug("Projected %d days from %s at %s/day -> %s",
              days, initial_balance, daily_rate, timeline[-1].balance)
    return timeline


def trades_needed(balance, daily_target_pct, risk_per_trade_pct) -> TradesNeeded:
    """
    Estimate winning trades per day needed to hit the daily target.

    Assumes 1:1 reward-to-risk and that every trade wins. Returns UNBOUNDED
    when a single trade cannot make a profit (balance or risk <= 0).
    """
    balance = _to_decimal(balance, "balance")
    target = _to_decimal(daily_target_pct, "daily_target_pct")
    risk = _to_decimal(risk_per_trade_pct, "risk_per_trade_pct")

    profit_per_win = risk * balance
    if profit_per_win <= 0:
        return UNBOUNDED

    # (target * balance) / (risk * balance): balance cancels
    return max(0, math.ceil(target / risk))


def format_trades_needed(value: TradesNeeded) -> str:
    if value is UNBOUNDED:
        return "∞"
    return str(value)


def timeline_to_csv(timeline: List[TimelinePoint]) -> str:
    """Render a timeline as `day,balance` delimited text."""
    frame = pd.DataFrame(
        {
            "day": [p.day for p in timeline],
            "balance": [f"{p.balance:.{Config.DISPLAY_PLACES}f}" for p in timeline],
        },
        columns=ExportConfig.CSV_COLUMNS,
    )
    return frame.to_csv(index=False, lineterminator="\n")


class GrowthPlanner:
    """Runs projections and trade estimates for one parameter set."""

    def __init__(self, params: GrowthParameters):
        self.params = params
        self._timeline: Optional[List[TimelinePoint]] = None

    @classmethod
    def from_values(cls, balance, daily_rate_pct, risk_per_trade_pct, days) -> "GrowthPlanner":
        return cls(GrowthParameters(
            initial_balance=balance,
            daily_rate_pct=daily_rate_pct,
            risk_per_trade_pct=risk_per_trade_pct,
            days=days,
        ))

    def timeline(self) -> List[TimelinePoint]:
        if self._timeline is None:
            self._timeline = project(self.params.initial_balance, self.params.daily_rate_pct, self.params.days)
        return self._timeline

    def final_balance(self) -> Decimal:
        return self.timeline()[-1].balance

    def trades_needed(self, balance=None) -> TradesNeeded:
        """Trades/day for `balance`, defaulting to the starting balance."""
        if balance is None:
            balance = self.params.initial_balance
        return trades_needed(balance, self.params.daily_rate_pct, self.params.risk_per_trade_pct)

    def timeline_frame(self) -> pd.DataFrame:
        """Timeline as a DataFrame with float balances for charting."""
        points = self.timeline()
        return pd.DataFrame({
            "day": [p.day for p in points],
            "balance": [float(p.balance) for p in points],
        })

    def plan_table(self, limit: Optional[int] = None) -> pd.DataFrame:
        """Per-day balance and trades needed at that balance."""
        points = self.timeline()
        if limit is not None:
            points = points[:limit]

        return pd.DataFrame({
            "day": [p.day for p in points],
            "balance": [float(p.balance) for p in points],
            "trades_needed": [format_trades_needed(self.trades_needed(p.balance)) for p in points],
        })

    def to_csv(self) -> str:
        csv_text = timeline_to_csv(self.timeline())
        log.info("Exported %d-day timeline to CSV", self.params.days)
        return csv_text
