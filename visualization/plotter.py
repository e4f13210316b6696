from typing import Optional, Tuple
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path
import logging

from diagnostics.autocorrelation import acf, pacf, confidence_band
from simulation.models import GARCHPath

logger = logging.getLogger(__name__)


class TimeSeriesVisualizer:
    """Plots simulated sample paths and their autocorrelation diagnostics"""

    def __init__(self, style: str = 'seaborn-v0_8',
                 figsize: Tuple[float, float] = (12, 6)):
        """
        Initialize visualizer

        Parameters:
        -----------
        style : str
            Matplotlib style to use. Default is 'seaborn-v0_8'.
            Available styles can be listed with `plt.style.available`
        figsize : tuple
            Size of single-panel figures
        """
        # Set style safely with fallback options
        try:
            plt.style.use(style)
        except OSError:
            try:
                plt.style.use('seaborn-v0_8')
            except OSError:
                plt.style.use('default')
            logger.warning(f"Style '{style}' not found, using fallback style")

        self.figsize = figsize
        self.colors = plt.rcParams['axes.prop_cycle'].by_key()['color']

    def _finish(self, fig: plt.Figure, save_path: Optional[Path]) -> plt.Figure:
        if save_path:
            fig.savefig(save_path)
            logger.info(f"Saved figure to {save_path}")
        return fig

    def plot_series(self,
                    series,
                    title: Optional[str] = None,
                    ylabel: str = 'Value',
                    save_path: Optional[Path] = None) -> plt.Figure:
        """
        Line plot of a simulated sequence

        Parameters:
        -----------
        series : array-like
            Sequence to plot against its time index
        title : str, optional
            Plot title
        ylabel : str
            Y-axis label
        save_path : Path, optional
            Path to save figure
        """
        values = np.asarray(series, dtype=float)
        if len(values) == 0:
            raise ValueError("Empty input data")

        fig, ax = plt.subplots(figsize=self.figsize)
        ax.plot(np.arange(len(values)), values, color=self.colors[0], linewidth=1)
        ax.set_xlabel('t')
        ax.set_ylabel(ylabel)
        if title:
            ax.set_title(title)
        ax.grid(True)

        return self._finish(fig, save_path)

    def plot_garch_path(self,
                        path: GARCHPath,
                        title: Optional[str] = None,
                        save_path: Optional[Path] = None) -> plt.Figure:
        """
        Plot a GARCH path: mean-equation series above, conditional variance below
        """
        if len(path) == 0:
            raise ValueError("Empty input data")

        t = np.arange(len(path))
        fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(self.figsize[0], 8), sharex=True)

        ax1.plot(t, path.series, color=self.colors[0], linewidth=1)
        ax1.set_ylabel('y[t]')
        ax1.grid(True)

        ax2.plot(t, path.variance, color=self.colors[1], linewidth=1)
        ax2.set_xlabel('t')
        ax2.set_ylabel('Conditional variance')
        ax2.grid(True)

        if title:
            fig.suptitle(title)

        plt.tight_layout()

        return self._finish(fig, save_path)

    def plot_autocorrelation(self,
                             table: pd.Series,
                             nobs: int,
                             title: Optional[str] = None,
                             alpha: float = 0.05,
                             ax: Optional[plt.Axes] = None,
                             save_path: Optional[Path] = None) -> plt.Figure:
        """
        Bar plot of an ACF or PACF table with the white-noise band

        Parameters:
        -----------
        table : Series
            Autocorrelation values indexed by lag
        nobs : int
            Length of the sequence the table was estimated from
        title : str, optional
            Plot title, defaults to the table name
        alpha : float
            Significance level of the confidence band
        ax : Axes, optional
            Draw into an existing axes instead of a new figure
        save_path : Path, optional
            Path to save figure
        """
        if len(table) == 0:
            raise ValueError("Empty input data")

        if ax is None:
            fig, ax = plt.subplots(figsize=self.figsize)
        else:
            fig = ax.figure

        band = confidence_band(nobs, alpha)
        ax.bar(table.index, table.values, width=0.3, color=self.colors[0])
        ax.axhline(y=0, color='k', linewidth=0.8)
        ax.axhline(y=band, color='k', linestyle='--', alpha=0.5)
        ax.axhline(y=-band, color='k', linestyle='--', alpha=0.5)
        ax.set_xlabel('Lag')
        ax.set_ylabel(str(table.name).upper() if table.name else 'Autocorrelation')
        ax.set_title(title or str(table.name).upper())
        ax.grid(True)

        return self._finish(fig, save_path)

    def plot_diagnostics(self,
                         series,
                         maxlag: int = 20,
                         title: Optional[str] = None,
                         save_path: Optional[Path] = None) -> plt.Figure:
        """
        Create diagnostic grid: path, marginal distribution, ACF and PACF
        """
        values = np.asarray(series, dtype=float)
        if len(values) == 0:
            raise ValueError("Empty input data")

        fig = plt.figure(figsize=(15, 10))
        gs = fig.add_gridspec(2, 2)

        # Sample path
        ax1 = fig.add_subplot(gs[0, 0])
        ax1.plot(np.arange(len(values)), values, color=self.colors[0], linewidth=1)
        ax1.set_title('Sample Path')

        # Marginal distribution
        ax2 = fig.add_subplot(gs[0, 1])
        sns.histplot(values, ax=ax2, bins=30, kde=True)
        ax2.set_title('Distribution')

        # ACF and PACF
        ax3 = fig.add_subplot(gs[1, 0])
        self.plot_autocorrelation(acf(values, maxlag), len(values), title='ACF', ax=ax3)

        ax4 = fig.add_subplot(gs[1, 1])
        self.plot_autocorrelation(pacf(values, maxlag), len(values), title='PACF', ax=ax4)

        if title:
            fig.suptitle(title, y=1.02)

        plt.tight_layout()

        return self._finish(fig, save_path)

    def close_all(self):
        """Close all open figures"""
        plt.close('all')

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close_all()
