# gpreg/plot/plotutils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import sys
import numpy as np
import scipy.stats as stats
import matplotlib.pyplot as plt
from matplotlib import interactive


class Figure:
    """Figures manager class for 1D GP posteriors."""

    def __init__(self, nrows=1, ncols=1, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = False
            if sys.flags.interactive:
                self.interpreter = True

        if isinteractive & self.interpreter:
            interactive(True)

        self.boxoff = boxoff

        self.fig = plt.figure(**kargs)

        self.nrows = nrows
        self.ncols = ncols
        self.axes = []
        for i in range(nrows * ncols):
            self.axes.append(self.fig.add_subplot(nrows, ncols, i + 1))
        self.ax = self.axes[0]
        if self.boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def subplot(self, i):
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.set_boxoff()

    def show(self, grid=None, legend=None):
        if grid:
            self.grid()
        if legend:
            self.legend()
        plt.show()

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="data"):
        self.ax.plot(x, z, "rs", markerfacecolor="none", markersize=6, label=label)

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(self, visible=True, which="major", linestyle=(0, (1, 5)), linewidth=0.5):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth)

    def plotgp(
        self,
        x,
        mean,
        variance,
        mean_label="posterior mean",
        ci=(0.95, 0.99, 0.999),
        ci_labels=("CI 95%", "CI 99%", "CI 99.9%"),
    ):
        """Posterior mean with coverage intervals.

        norminv (1 - 0.05/2)  = 1.959964
        norminv (1 - 0.01/2)  = 2.575829
        norminv (1 - 0.001/2) = 3.290527
        """
        x = np.asarray(x).flatten()
        mean = np.asarray(mean).flatten()
        std = np.sqrt(np.maximum(np.asarray(variance).flatten(), 0.0))
        order = np.argsort(x)
        x, mean, std = x[order], mean[order], std[order]

        delta0 = [stats.norm.ppf((1 + level) / 2) for level in ci][::-1]
        labels = list(ci_labels)[::-1]
        fillcol = ["#F2F2F2", "#D8D8D8", "#BFBFBF"]

        self.ax.plot(x, mean, "#F2404C", linewidth=2.0, label=mean_label)
        for i, delta in enumerate(delta0):
            lower = mean - delta * std
            upper = mean + delta * std
            self.ax.fill(
                np.hstack((x, x[::-1])),
                np.hstack((upper, lower[::-1])),
                color=fillcol[i % len(fillcol)],
                alpha=0.8,
                linewidth=0.5,
                label=labels[i],
            )
