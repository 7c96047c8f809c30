"""
monty_hall_simulator.py
=======================
Bulk Monte-Carlo estimate of the Monty Hall win rates using a Numba-JIT
compiled kernel.

Where ``monty_hall`` plays readable rounds one at a time, this module runs
millions of rounds in parallel and reports the stay / switch win rates.

Public API
----------
monty_hall_trial  – Numba kernel: one round, returns ``[stay_win, switch_win]``.
mass_simulate     – Parallel driver running ``cap`` rounds.
results_analyser  – Print win-rate stats and optionally plot them.
gen_simulator     – Run the driver and analyse the results.
"""
import time
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.ticker import AutoMinorLocator
import numba as nb
import numpy as np

from monty_hall import Strategy, validate_count


CATEGORIES = tuple(strategy.value for strategy in Strategy)

# Long-run win rate of each strategy, drawn as reference lines on the plots.
THEORETICAL_WIN_RATE = {
    Strategy.STAY.value: 1 / 3,
    Strategy.SWITCH.value: 2 / 3,
}


@nb.njit(cache=True)
def monty_hall_trial() -> np.ndarray:
    """One Monty Hall round scored for both strategies"""
    # np.random.randint(low, high): high is EXCLUSIVE
    car_door = np.random.randint(1, 4)
    first_pick = np.random.randint(1, 4)

    if first_pick == car_door:
        # Both other doors hide goats: step forward one or two doors.
        opened_door = (first_pick - 1 + np.random.randint(1, 3)) % 3 + 1
    else:
        # Door numbers sum to 6, so the third door is what's left.
        opened_door = 6 - first_pick - car_door

    switch_pick = 6 - first_pick - opened_door

    out = np.empty(2, dtype=np.float32)
    out[0] = 1.0 if first_pick == car_door else 0.0
    out[1] = 1.0 if switch_pick == car_door else 0.0
    return out


# nb.prange distributes trials across CPU cores.
@nb.njit(parallel=True, cache=True)
def mass_simulate(cap: int, seed: int) -> np.ndarray:
    """Run ``cap`` rounds; returns float32 ``(cap, 2)``. ``seed=-1`` skips seeding."""
    if seed >= 0:
        np.random.seed(seed)
    out = np.empty((cap, 2), dtype=np.float32)
    for i in nb.prange(cap):
        out[i] = monty_hall_trial()
    return out


def _plot_win_rates(results: np.ndarray, categories: Sequence[str]) -> None:
    # –– Plot 1: win rate per strategy, with the theoretical rate marked
    means = results.mean(axis=0)

    fig, ax = plt.subplots()
    ax.set_axisbelow(True)  # grid goes behind bars/lines
    ax.yaxis.set_minor_locator(AutoMinorLocator(2))
    ax.minorticks_on()

    positions = np.arange(len(categories))
    ax.bar(positions, means, color='blue', alpha=0.7, zorder=2)
    for pos, category in zip(positions, categories):
        expected = THEORETICAL_WIN_RATE.get(category)
        if expected is not None:
            ax.hlines(expected, pos - 0.4, pos + 0.4, color='red', linestyle='--', zorder=3)

    ax.set_xticks(positions)
    ax.set_xticklabels(categories)
    ax.set_ylim(0, 1)
    ax.set_xlabel("Strategy")
    ax.set_ylabel("Win rate")
    ax.set_title("Monty Hall Win Rate by Strategy")

    ax.grid(which='major', axis='y', linestyle='-', linewidth=0.7, color='gray', alpha=0.7)
    ax.grid(which='minor', axis='y', linestyle=':', linewidth=0.5, color='gray', alpha=0.5)

    plt.tight_layout()
    plt.show(block=False)
    plt.pause(0.001)

    # –– Plot 2: running win rate, showing convergence as trials accumulate
    trials = np.arange(1, results.shape[0] + 1)
    running = np.cumsum(results, axis=0) / trials[:, None]

    fig, ax = plt.subplots()
    ax.set_axisbelow(True)
    ax.xaxis.set_minor_locator(AutoMinorLocator(2))
    ax.yaxis.set_minor_locator(AutoMinorLocator(2))
    ax.minorticks_on()

    prop_cycle_colors = [c["color"] for c in plt.rcParams["axes.prop_cycle"]]
    for i, category in enumerate(categories):
        color = prop_cycle_colors[i % len(prop_cycle_colors)]
        ax.plot(trials, running[:, i], color=color, linewidth=1.5, label=category, zorder=2)
        expected = THEORETICAL_WIN_RATE.get(category)
        if expected is not None:
            ax.axhline(expected, color=color, linestyle='--', linewidth=1, zorder=1)

    ax.set_xscale('log')
    ax.set_ylim(0, 1)
    ax.set_xlabel("Trials")
    ax.set_ylabel("Running win rate")
    ax.set_title("Convergence of Monty Hall Win Rates")

    ax.grid(which='major', linestyle='-', linewidth=0.7, color='gray', alpha=0.7)
    ax.grid(which='minor', linestyle=':', linewidth=0.5, color='gray', alpha=0.5)
    ax.legend()

    plt.tight_layout()
    plt.show(block=False)
    plt.pause(0.001)


def results_analyser(
    results: np.ndarray,
    should_plot: bool,
    categories: Sequence[str] = CATEGORIES,
) -> tuple[np.ndarray, np.ndarray]:
    """Print win-rate statistics and optionally plot them for every strategy.

    Args:
        results: Win matrix of shape ``(n_trials, n_categories)`` holding 1.0
            for a win and 0.0 for a loss, as returned by ``mass_simulate`` or
            ``monty_hall.batch_to_array``.
        should_plot: If True, display a win-rate bar chart and a running
            win-rate convergence chart.
        categories: Column labels. Defaults to ``("stay", "switch")``.

    Returns:
        Tuple of ``(means, stds)``, each a 1-D array with one value per
        category. Both are NaN when ``results`` holds no trials.
    """
    n_trials = results.shape[0]

    if n_trials == 0:
        print("No trials to analyse.")
        print("")
        nan = np.full(len(categories), np.nan)
        return nan, nan.copy()

    means = np.mean(results, axis=0)
    stds = np.std(results, axis=0)
    std_errors = stds / np.sqrt(n_trials)

    print(f"Monty Hall results over {n_trials:,} trials")
    print("")

    for i, category in enumerate(categories):
        rows: list[tuple[str, str]] = [
            (f"{category} win rate",           str(round(float(means[i]), 6))),
            (f"{category} standard deviation", str(round(float(stds[i]), 6))),
            (f"{category} standard error",     str(round(float(std_errors[i]), 6))),
        ]
        expected = THEORETICAL_WIN_RATE.get(category)
        if expected is not None:
            rows.append((f"{category} theoretical", str(round(expected, 6))))

        col_width = max(len(label) for label, _ in rows)
        for label, value in rows:
            print(f"{label:<{col_width}}: {value}")

        print("")

    if should_plot:
        _plot_win_rates(results, categories)
        # Block until the user closes all open plot windows before returning.
        plt.show(block=True)

    return means, stds


def gen_simulator(
    cap: int,
    should_plot: bool,
    seed: int | None = None,
) -> tuple[np.ndarray, tuple[np.ndarray, np.ndarray]]:
    """Run ``cap`` Monty Hall rounds in parallel and analyse the results.

    Args:
        cap: Number of independent rounds to simulate (e.g. ``10**6``).
        should_plot: If True, display the win-rate charts.
        seed: Optional seed for Numba's RNG. Results repeat for the same seed
            and the same number of threads (``NUMBA_NUM_THREADS``).

    Returns:
        Tuple of:
            - ``results``: Raw float32 array of shape ``(cap, 2)``.
            - ``analysis``: ``(means, stds)`` from ``results_analyser``.

    Raises:
        ValueError: ``cap`` is negative or not an integer.
    """
    cap = validate_count("cap", cap)

    if len(mass_simulate.nopython_signatures) == 0:
        print("Preparing JIT kernel...", end="", flush=True)
        t0 = time.perf_counter()
        mass_simulate(0, -1)     # zero-trial warmup: compiles/loads cache, runs no trials
        print(f" done in {time.perf_counter() - t0:.2f}s")

    print(f"Running {cap:,} trials...", end="", flush=True)
    t0 = time.perf_counter()
    results = mass_simulate(cap, seed if seed is not None else -1)
    print(f" done in {time.perf_counter() - t0:.2f}s")
    print("")

    analysis = results_analyser(results, should_plot)

    return results, analysis
