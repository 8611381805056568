import os

import matplotlib.pyplot as plt
import numpy as np
import plotly.express as px
import plotly.graph_objects as go
import seaborn as sns


class ConvergenceVisualizer:
    """
    Class to visualize GWO convergence and run-to-run spread
    """
    def __init__(self, output_dir='visualizations'):
        """
        Initialize visualizer

        Args:
            output_dir: Directory to save visualizations
        """
        self.output_dir = output_dir

        # Create output directory if it doesn't exist
        os.makedirs(output_dir, exist_ok=True)

    def plot_convergence(self, history, save_path=None, interactive=False, log_scale=True, labels=None):
        """
        Plot best score per iteration

        Args:
            history: Best scores of one run, or a list of such histories
            save_path: Path to save the plot
            interactive: Whether to create interactive plots with Plotly
            log_scale: Use a log y-axis when every score is positive
            labels: Legend label per history

        Returns:
            None
        """
        histories = _as_histories(history)
        if labels is None:
            labels = [f'Run {i}' for i in range(len(histories))]

        use_log = log_scale and all(len(h) and np.all(np.asarray(h) > 0) for h in histories)

        if interactive:
            fig = go.Figure()

            for scores, label in zip(histories, labels):
                fig.add_trace(
                    go.Scatter(x=list(range(len(scores))),
                               y=list(scores),
                               mode='lines',
                               name=label)
                )

            fig.update_layout(
                title='GWO Convergence',
                xaxis_title='Iteration',
                yaxis_title='Best Score',
                yaxis_type='log' if use_log else 'linear',
                height=600,
                width=1000
            )

            _save_or_show_plotly(fig, save_path)
        else:
            plt.figure(figsize=(12, 6))

            for scores, label in zip(histories, labels):
                plt.plot(range(len(scores)), scores, lw=2, label=label)

            if use_log:
                plt.yscale('log')
            plt.xlabel('Iteration')
            plt.ylabel('Best Score')
            plt.title('GWO Convergence')
            if len(histories) > 1:
                plt.legend(loc='upper right')
            plt.grid(True)

            _save_or_show_matplotlib(save_path)

    def plot_final_scores(self, trials_df, save_path=None, interactive=False):
        """
        Plot the distribution of final scores across runs

        Args:
            trials_df: DataFrame from run_trials()
            save_path: Path to save the plot
            interactive: Whether to create interactive plots with Plotly

        Returns:
            None
        """
        if interactive:
            fig = px.box(
                trials_df[['trial', 'seed', 'best_score']],
                y='best_score',
                points='all',
                hover_data=['trial', 'seed'],
                labels={'best_score': 'Best Score'}
            )

            fig.update_layout(
                title='Final Best Score per Run',
                width=800,
                height=600
            )

            _save_or_show_plotly(fig, save_path)
        else:
            plt.figure(figsize=(8, 6))
            sns.boxplot(y=trials_df['best_score'], color='lightsteelblue')
            sns.stripplot(y=trials_df['best_score'], color='black', size=4)
            plt.ylabel('Best Score')
            plt.title('Final Best Score per Run')
            plt.grid(True, axis='y')

            _save_or_show_matplotlib(save_path)

    def plot_summary_table(self, summary_df, save_path=None, interactive=False):
        """
        Plot summary statistics as a table

        Args:
            summary_df: DataFrame from summarize_trials()
            save_path: Path to save the plot
            interactive: Whether to create interactive plot with Plotly

        Returns:
            None
        """
        if interactive:
            fig = go.Figure(data=[
                go.Table(
                    header=dict(
                        values=list(summary_df.columns),
                        fill_color='paleturquoise',
                        align='center'
                    ),
                    cells=dict(
                        values=[summary_df[col] for col in summary_df.columns],
                        fill_color='lavender',
                        align='center',
                        format=[None] + ['.4e'] * (len(summary_df.columns) - 1)
                    )
                )
            ])

            fig.update_layout(
                title='GWO Run Summary',
                width=800,
                height=300
            )

            _save_or_show_plotly(fig, save_path)
        else:
            plt.figure(figsize=(10, 2))

            # Hide axes
            ax = plt.gca()
            ax.get_xaxis().set_visible(False)
            ax.get_yaxis().set_visible(False)

            cell_text = [[_format_cell(v) for v in row] for row in summary_df.itertuples(index=False)]
            table = plt.table(
                cellText=cell_text,
                colLabels=summary_df.columns,
                cellLoc='center',
                loc='center',
                bbox=[0, 0, 1, 1]
            )
            table.auto_set_font_size(False)
            table.set_fontsize(12)

            plt.title('GWO Run Summary', pad=20)

            _save_or_show_matplotlib(save_path)


def _as_histories(history):
    history = list(history)
    if len(history) and np.ndim(history[0]) > 0:
        return [list(h) for h in history]
    return [list(history)]


def _format_cell(value):
    if isinstance(value, (int, np.integer)):
        return str(value)
    return f'{value:.4e}'


def _save_or_show_matplotlib(save_path):
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')
        plt.close()
    else:
        plt.show()


def _save_or_show_plotly(fig, save_path):
    if save_path:
        if not save_path.endswith('.html'):
            save_path += '.html'
        fig.write_html(save_path)
    else:
        fig.show()
