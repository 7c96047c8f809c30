"""
monty_hall.py
=============
Round-by-round simulation of the Monty Hall game.

Three doors hide one car and two goats. The contestant picks a door, the
host opens a different door that hides a goat, and the contestant either
stays with the first pick or switches to the one remaining closed door.

Every random draw goes through an explicit ``numpy.random.Generator`` so a
seeded generator reproduces a game exactly.

Public API
----------
create_game       – Random arrangement of (goat, goat, car) behind doors 1–3.
select_door       – Uniform random first pick.
open_goat_door    – Host reveal: a goat door that is not the contestant's pick.
change_door       – Final pick under the STAY or SWITCH strategy.
determine_winner  – WIN / LOSE for a final pick.
play_game         – One round, both strategies, from one shared deal.
play_n_games      – Batch of rounds plus a printed proportion table.
summarize         – Per-strategy WIN / LOSE proportions of a batch.
batch_to_array    – Batch as a (n, 2) float32 win matrix (stay, switch).
"""
from collections import Counter
from enum import Enum
from typing import NamedTuple

import numpy as np


DOORS = (1, 2, 3)


class Label(Enum):
    CAR = "car"
    GOAT = "goat"


class Strategy(Enum):
    STAY = "stay"
    SWITCH = "switch"


class Outcome(Enum):
    WIN = "WIN"
    LOSE = "LOSE"


# Door d sits at index d - 1.
Arrangement = tuple[Label, Label, Label]

_CONTENTS = (Label.GOAT, Label.GOAT, Label.CAR)


class GameRound(NamedTuple):
    """Everything dealt in one round, shared by both strategy evaluations.

    Attributes:
        arrangement: What is behind doors 1, 2 and 3.
        first_pick: The contestant's initial door.
        opened_door: The goat door the host revealed.
    """

    arrangement: Arrangement
    first_pick: int
    opened_door: int


class RoundResult(NamedTuple):
    strategy: Strategy
    outcome: Outcome


def create_game(rng: np.random.Generator) -> Arrangement:
    """Shuffle two goats and one car behind the three doors."""
    order = rng.permutation(len(_CONTENTS))
    return tuple(_CONTENTS[i] for i in order)


def select_door(rng: np.random.Generator) -> int:
    """Pick one of the three doors uniformly at random."""
    return int(rng.integers(1, len(DOORS) + 1))  # high is EXCLUSIVE


def open_goat_door(game: Arrangement, first_pick: int, rng: np.random.Generator) -> int:
    """Choose the door the host opens.

    The host never opens the contestant's door and never opens the car.
    If the contestant picked the car both other doors hide goats and the
    host chooses between them at random; otherwise exactly one door is
    left and no randomness is used.

    Assumes ``first_pick`` is in ``DOORS`` and ``game`` holds exactly one
    car. Neither is checked here.

    Args:
        game: Arrangement from ``create_game``.
        first_pick: The contestant's current door.
        rng: Source of the coin flip in the car-picked branch.

    Returns:
        The opened door number, 1–3.
    """
    if game[first_pick - 1] is Label.CAR:
        goat_doors = [d for d in DOORS if game[d - 1] is Label.GOAT]
        return int(rng.choice(goat_doors))

    return next(
        d for d in DOORS
        if d != first_pick and game[d - 1] is Label.GOAT
    )


def change_door(strategy: Strategy, opened_door: int, first_pick: int) -> int:
    """Return the final pick for ``strategy``.

    STAY keeps ``first_pick``. SWITCH moves to the only door that is
    neither the opened door nor the first pick.

    Raises:
        TypeError: ``strategy`` is not a ``Strategy``.
    """
    if not isinstance(strategy, Strategy):
        raise TypeError(
            f"strategy must be a Strategy, got {type(strategy).__name__}: {strategy!r}"
        )

    if strategy is Strategy.STAY:
        return first_pick
    return next(d for d in DOORS if d != opened_door and d != first_pick)


def determine_winner(final_pick: int, game: Arrangement) -> Outcome:
    return Outcome.WIN if game[final_pick - 1] is Label.CAR else Outcome.LOSE


def deal_round(rng: np.random.Generator) -> GameRound:
    """Set up the doors, make the first pick and open a goat door."""
    game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(game, first_pick, rng)
    return GameRound(game, first_pick, opened_door)


def play_game(rng: np.random.Generator | None = None) -> list[RoundResult]:
    """Play one round and score it under both strategies.

    Both strategies are judged against the same deal, so any difference in
    outcome comes from the strategy alone.

    Args:
        rng: Random generator. A fresh unseeded one is used when omitted.

    Returns:
        Two rows, ``[RoundResult(STAY, ...), RoundResult(SWITCH, ...)]``.
    """
    if rng is None:
        rng = np.random.default_rng()

    game_round = deal_round(rng)

    results = []
    for strategy in Strategy:
        final_pick = change_door(strategy, game_round.opened_door, game_round.first_pick)
        outcome = determine_winner(final_pick, game_round.arrangement)
        results.append(RoundResult(strategy, outcome))
    return results


def validate_count(name: str, value: object) -> int:
    # bool is an int subclass but never a sensible count.
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value}")
    return int(value)


def summarize(batch: list[RoundResult]) -> dict[Strategy, dict[Outcome, float]]:
    """Per-strategy WIN / LOSE proportions, rounded to 2 decimal places.

    Each strategy row sums to 1 (up to rounding). Strategies that never
    appear in ``batch`` are left out.
    """
    counts = Counter(batch)

    summary: dict[Strategy, dict[Outcome, float]] = {}
    for strategy in Strategy:
        row_total = sum(counts[RoundResult(strategy, o)] for o in Outcome)
        if row_total == 0:
            continue
        summary[strategy] = {
            o: round(counts[RoundResult(strategy, o)] / row_total, 2)
            for o in sorted(Outcome, key=lambda o: o.value)
        }
    return summary


def format_summary(summary: dict[Strategy, dict[Outcome, float]]) -> str:
    """Render ``summary`` as a table with one row per strategy."""
    outcomes = sorted(Outcome, key=lambda o: o.value)
    label_width = max(len("strategy"), *(len(s.value) for s in Strategy))

    header = f"{'strategy':<{label_width}}" + "".join(f"  {o.value:>5}" for o in outcomes)
    lines = [header]
    for strategy, row in summary.items():
        lines.append(
            f"{strategy.value:<{label_width}}"
            + "".join(f"  {row[o]:>5.2f}" for o in outcomes)
        )
    return "\n".join(lines)


def play_n_games(
    n: int = 100,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> list[RoundResult]:
    """Play ``n`` rounds, print the proportion table and return every row.

    Args:
        n: Number of rounds. Zero gives an empty batch.
        rng: Random generator shared by all rounds. Takes precedence over
            ``seed``.
        seed: Seed for a fresh ``np.random.default_rng`` when ``rng`` is
            not given.

    Returns:
        ``2 * n`` ``RoundResult`` rows, a STAY row then a SWITCH row per round.

    Raises:
        ValueError: ``n`` is negative or not an integer.
    """
    n = validate_count("n", n)
    if rng is None:
        rng = np.random.default_rng(seed)

    results: list[RoundResult] = []
    for _ in range(n):
        results.extend(play_game(rng))

    print(format_summary(summarize(results)))
    print("")

    return results


def batch_to_array(batch: list[RoundResult]) -> np.ndarray:
    """Convert a batch to a float32 array of shape ``(rounds, 2)``.

    Column 0 is the STAY result and column 1 the SWITCH result for each
    round, 1.0 for a win and 0.0 for a loss.
    """
    columns = {strategy: i for i, strategy in enumerate(Strategy)}
    n_rounds = len(batch) // len(columns)

    out = np.zeros((n_rounds, len(columns)), dtype=np.float32)
    per_strategy_row = Counter()
    for result in batch:
        row = per_strategy_row[result.strategy]
        per_strategy_row[result.strategy] += 1
        if row < n_rounds and result.outcome is Outcome.WIN:
            out[row, columns[result.strategy]] = 1.0
    return out
