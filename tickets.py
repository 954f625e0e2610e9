"""Demo accumulator-ticket generator for the betting planner tab."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from config import TicketConfig as Config

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    name: str
    prob: float


@dataclass(frozen=True)
class Match:
    home: str
    away: str
    options: Tuple[Outcome, ...]

    @property
    def label(self) -> str:
        return f"{self.home} vs {self.away}"


@dataclass(frozen=True)
class Pick:
    match: str
    pick: str
    confidence: float


@dataclass
class Ticket:
    id: int
    picks: List[Pick] = field(default_factory=list)


def load_matches(raw: list) -> List[Match]:
    """Build Match objects from config-style dicts."""
    return [
        Match(
            home=m["home"],
            away=m["away"],
            options=tuple(Outcome(name=o["name"], prob=float(o["prob"])) for o in m["options"]),
        )
        for m in raw
    ]


def generate_accumulator_tickets(matches: List[Match],
                                 tickets_count: Optional[int] = None,
                                 selections_per_ticket: Optional[int] = None,
                                 rng=None,
                                 upset_chance: Optional[float] = None) -> List[Ticket]:
    """
    Generate demo tickets from shuffled matches.

    Each ticket takes up to `selections_per_ticket` matches in random order and
    backs the favourite, occasionally swapping in the second favourite.

    Args:
        matches: Fixtures to pick from
        tickets_count: Number of tickets (default TicketConfig.DEFAULT_TICKETS)
        selections_per_ticket: Picks per ticket (capped at len(matches))
        rng: Seed or numpy Generator; None for fresh entropy
        upset_chance: Probability of taking the second favourite (default TicketConfig.UPSET_CHANCE)

    Returns:
        list[Ticket]: Tickets with ids 1..tickets_count
    """
    if tickets_count is None:
        tickets_count = Config.DEFAULT_TICKETS
    if selections_per_ticket is None:
        selections_per_ticket = Config.DEFAULT_SELECTIONS
    if upset_chance is None:
        upset_chance = Config.UPSET_CHANCE
    if tickets_count < 0:
        raise ValueError(f"tickets_count must be >= 0, got {tickets_count}")
    if selections_per_ticket < 0:
        raise ValueError(f"selections_per_ticket must be >= 0, got {selections_per_ticket}")

    rng = np.random.default_rng(rng)
    per_ticket = min(selections_per_ticket, len(matches))

    tickets = []
    for t in range(tickets_count):
        order = rng.permutation(len(matches))
        picks = []
        for idx in order[:per_ticket]:
            m = matches[idx]
            ranked = sorted(m.options, key=lambda o: o.prob, reverse=True)
            if not ranked:
                continue
            upset = rng.random() < upset_chance
            choice = ranked[1] if upset and len(ranked) > 1 else ranked[0]
            picks.append(Pick(match=m.label, pick=choice.name, confidence=choice.prob))
        tickets.append(Ticket(id=t + 1, picks=picks))

    log.info("Generated %d tickets x %d selections", tickets_count, per_ticket)
    return tickets


def tickets_frame(tickets: List[Ticket]) -> pd.DataFrame:
    """Flatten tickets into one row per pick."""
    rows = [
        {
            "ticket": t.id,
            "match": p.match,
            "pick": p.pick,
            "confidence_pct": round(p.confidence * 100),
        }
        for t in tickets
        for p in t.picks
    ]
    return pd.DataFrame(rows, columns=["ticket", "match", "pick", "confidence_pct"])
