"""
run_monty_hall.py
=================
Compare the stay and switch strategies of the Monty Hall game.

Usage
-----
1. Set ``n_games`` for the round-by-round batch (prints the WIN / LOSE
   proportion table per strategy).
2. Set ``cap`` for the bulk Numba run (prints win rates, standard errors
   and the theoretical 1/3 vs 2/3 reference). Set ``cap = 0`` to skip it.
3. Set ``seed``, ``should_plot`` and ``do_profiling`` as needed, then run
   the file.
"""
import time

from monty_hall import batch_to_array, play_n_games
from monty_hall_simulator import gen_simulator, results_analyser


if __name__ == "__main__":
    # --- Run settings ---
    n_games = 100      # round-by-round games, each scored under both strategies
    cap = 10**6        # bulk Numba trials
    seed = None        # int for reproducible runs
    should_plot = True

    do_profiling = False   # set True to print a cProfile timing breakdown

    if do_profiling:
        import cProfile, pstats, io
        from pstats import SortKey
        profiler = cProfile.Profile()
        profiler.enable()

    print(f"Playing {n_games:,} games...")
    t0 = time.perf_counter()
    batch = play_n_games(n_games, seed=seed)
    print(f"Played {len(batch) // 2:,} games in {time.perf_counter() - t0:.2f}s")
    print("")

    # Only the bulk run gets plots; its convergence chart covers the batch too.
    results_analyser(batch_to_array(batch), should_plot=should_plot and cap == 0)

    if cap > 0:
        results, analysis = gen_simulator(cap, should_plot, seed=seed)

    if do_profiling:
        profiler.disable()
        s = io.StringIO()
        pstats.Stats(profiler, stream=s).sort_stats(SortKey.CUMULATIVE).print_stats(25)
        print(s.getvalue())
