import pandas as pd
from tqdm import tqdm

from optimizer.gwo import GreyWolfOptimizer


def run_trials(n_runs, seeds=None, show_progress=True, **optimizer_kwargs):
    """
    Run several independent GWO optimizations

    Args:
        n_runs: Number of runs
        seeds: Seed per run, defaults to 0..n_runs-1
        show_progress: Show a tqdm progress bar
        **optimizer_kwargs: Arguments passed to every GreyWolfOptimizer

    Returns:
        DataFrame with one row per run
    """
    if seeds is None:
        seeds = range(n_runs)
    seeds = list(seeds)
    if len(seeds) != n_runs:
        raise ValueError(f"Expected {n_runs} seeds, got {len(seeds)}")

    optimizer_kwargs.setdefault('verbose', False)

    rows = []
    for trial, seed in enumerate(tqdm(seeds, desc='GWO runs', disable=not show_progress)):
        gwo = GreyWolfOptimizer(seed=seed, **optimizer_kwargs)
        best_position, best_score = gwo.optimize()

        rows.append({
            'trial': trial,
            'seed': seed,
            'best_score': best_score,
            'best_position': best_position,
            'iterations': len(gwo.history),
            'history': list(gwo.history),
        })

    return pd.DataFrame(rows, columns=['trial', 'seed', 'best_score', 'best_position',
                                       'iterations', 'history'])


def summarize_trials(trials_df):
    """Summary statistics of the final scores"""
    scores = trials_df['best_score']
    return pd.DataFrame([{
        'runs': len(scores),
        'min': scores.min(),
        'max': scores.max(),
        'mean': scores.mean(),
        'median': scores.median(),
        'std': scores.std(ddof=0),
    }])
