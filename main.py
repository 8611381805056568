import os
import argparse

from optimizer.gwo import GreyWolfOptimizer, ConfigurationError
from optimizer.objectives import OBJECTIVES, get_objective
from optimizer.experiments import run_trials, summarize_trials
from visualization.visualizer import ConvergenceVisualizer


def main(args):
    objective_function = get_objective(args.objective)

    optimizer_kwargs = dict(
        num_wolves=args.num_wolves,
        dim=args.dim,
        max_iter=args.max_iter,
        lower_bound=args.lower_bound,
        upper_bound=args.upper_bound,
        objective_function=objective_function,
        clamp=args.clamp,
        cascade_leaders=args.cascade_leaders,
    )
    ext = 'html' if args.interactive else 'png'

    if args.runs == 1:
        gwo = GreyWolfOptimizer(seed=args.seed, verbose=not args.quiet, **optimizer_kwargs)
        best_position, best_score = gwo.optimize()

        print(f"Best position: {best_position.tolist()}")
        print(f"Best score: {best_score}")

        if args.plot:
            print("Plotting convergence...")
            visualizer = ConvergenceVisualizer(output_dir=args.output_dir)
            visualizer.plot_convergence(
                gwo.history,
                save_path=os.path.join(args.output_dir, f'convergence.{ext}'),
                interactive=args.interactive
            )

        return best_position, best_score

    # Consecutive seeds from --seed when given, otherwise 0..runs-1
    start = args.seed if args.seed is not None else 0
    seeds = list(range(start, start + args.runs))

    print(f"Running {args.runs} independent runs...")
    trials_df = run_trials(
        args.runs,
        seeds=seeds,
        show_progress=not args.quiet,
        **optimizer_kwargs
    )
    summary_df = summarize_trials(trials_df)
    print(summary_df.to_string(index=False))

    if args.plot:
        print("Plotting run statistics...")
        visualizer = ConvergenceVisualizer(output_dir=args.output_dir)
        visualizer.plot_convergence(
            trials_df['history'],
            save_path=os.path.join(args.output_dir, f'convergence.{ext}'),
            interactive=args.interactive,
            labels=[f'Seed {seed}' for seed in trials_df['seed']]
        )
        visualizer.plot_final_scores(
            trials_df,
            save_path=os.path.join(args.output_dir, f'final_scores.{ext}'),
            interactive=args.interactive
        )
        visualizer.plot_summary_table(
            summary_df,
            save_path=os.path.join(args.output_dir, f'summary_table.{ext}'),
            interactive=args.interactive
        )

    best = trials_df.loc[trials_df['best_score'].idxmin()]
    return best['best_position'], best['best_score']


def build_parser():
    parser = argparse.ArgumentParser(description='Minimize a function with the Grey Wolf Optimizer')
    parser.add_argument('--num_wolves', type=int, default=30,
                        help='Number of wolves in the pack')
    parser.add_argument('--dim', type=int, default=1,
                        help='Dimension of the search space')
    parser.add_argument('--max_iter', type=int, default=1000,
                        help='Number of iterations')
    parser.add_argument('--lower_bound', type=float, default=-10.0,
                        help='Lower bound of the search space')
    parser.add_argument('--upper_bound', type=float, default=10.0,
                        help='Upper bound of the search space')
    parser.add_argument('--objective', type=str, default='sphere', choices=sorted(OBJECTIVES),
                        help='Benchmark function to minimize')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed (first seed when --runs > 1)')
    parser.add_argument('--runs', type=int, default=1,
                        help='Number of independent runs')
    parser.add_argument('--clamp', action='store_true',
                        help='Clip wolves back into the bounds after each move')
    parser.add_argument('--cascade_leaders', action='store_true',
                        help='Shift displaced leaders down one rank (standard GWO ranking)')
    parser.add_argument('--plot', action='store_true',
                        help='Save convergence plots')
    parser.add_argument('--interactive', action='store_true',
                        help='Generate interactive Plotly visualizations')
    parser.add_argument('--output_dir', type=str, default='visualizations',
                        help='Directory for saved plots')
    parser.add_argument('--quiet', action='store_true',
                        help='Do not print per-iteration progress')
    return parser


def cli(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.runs < 1:
        parser.error(f"--runs must be at least 1, got {args.runs}")

    try:
        return main(args)
    except ConfigurationError as e:
        parser.error(str(e))


if __name__ == '__main__':
    cli()
