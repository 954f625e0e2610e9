from config import TicketConfig
from tickets import Match, Outcome, generate_accumulator_tickets, load_matches, tickets_frame


def _matches():
    return load_matches(TicketConfig.MOCK_MATCHES)


def test_load_matches():
    matches = _matches()
    assert len(matches) == 3
    assert matches[0].label == "Team A vs Team B"
    assert matches[0].options[0] == Outcome(name="1", prob=0.58)


def test_ticket_count_ids_and_size():
    tickets = generate_accumulator_tickets(_matches(), tickets_count=6, selections_per_ticket=6, rng=7)
    assert [t.id for t in tickets] == [1, 2, 3, 4, 5, 6]
    # Only 3 fixtures available, so each ticket is capped at 3 picks
    assert all(len(t.picks) == 3 for t in tickets)
    for t in tickets:
        assert len({p.match for p in t.picks}) == 3


def test_picks_are_favourite_or_second_favourite():
    matches = {m.label: m for m in _matches()}
    tickets = generate_accumulator_tickets(list(matches.values()), tickets_count=20, selections_per_ticket=3, rng=1)
    for t in tickets:
        for p in t.picks:
            ranked = sorted(matches[p.match].options, key=lambda o: o.prob, reverse=True)
            assert p.pick in (ranked[0].name, ranked[1].name)
            assert p.confidence in (ranked[0].prob, ranked[1].prob)


def test_no_upsets_always_backs_favourite():
    tickets = generate_accumulator_tickets(_matches(), tickets_count=5, selections_per_ticket=3, rng=3, upset_chance=0.0)
    favourites = {"Team A vs Team B": "1", "Team C vs Team D": "2", "Team E vs Team F": "2"}
    for t in tickets:
        for p in t.picks:
            assert p.pick == favourites[p.match]


def test_single_outcome_match_never_upsets():
    solo = [Match(home="H", away="A", options=(Outcome("1", 0.9),))]
    tickets = generate_accumulator_tickets(solo, tickets_count=10, selections_per_ticket=1, rng=0, upset_chance=1.0)
    assert all(t.picks[0].pick == "1" for t in tickets)


def test_seeded_generation_is_repeatable():
    a = generate_accumulator_tickets(_matches(), 4, 3, rng=42)
    b = generate_accumulator_tickets(_matches(), 4, 3, rng=42)
    assert a == b


def test_negative_count_rejected():
    failed = False
    try:
        generate_accumulator_tickets(_matches(), tickets_count=-1)
    except ValueError:
        failed = True
    assert failed, "Expected ValueError for negative tickets_count"


def test_tickets_frame():
    tickets = generate_accumulator_tickets(_matches(), 2, 3, rng=5)
    frame = tickets_frame(tickets)
    assert list(frame.columns) == ["ticket", "match", "pick", "confidence_pct"]
    assert len(frame) == 6
    assert set(frame["ticket"]) == {1, 2}


if __name__ == "__main__":
    test_load_matches()
    test_ticket_count_ids_and_size()
    test_picks_are_favourite_or_second_favourite()
    test_no_upsets_always_backs_favourite()
    test_single_outcome_match_never_upsets()
    test_seeded_generation_is_repeatable()
    test_negative_count_rejected()
    test_tickets_frame()
    print("test_tickets.py: PASS")
