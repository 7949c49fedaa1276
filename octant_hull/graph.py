import typing as t

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import PathCollection
from matplotlib.path import Path
from shapely.geometry import LinearRing

from octant_hull import data


class Plot:
    title: str

    def __init__(self, title: str = ""):
        self.title = title
        self.fig = plt.figure(self.title or None)
        self.ax = self.fig.gca()
        self.ax.set_aspect('equal')
        if self.title:
            self.ax.set_title(self.title)

    def draw_points(
        self,
        points: t.List[data.Point],
        color: str = 'blue',
        markersize: float = 4.0,
        zorder: float = 1,
    ):
        if not points:
            return
        x, y = np.array([p.array() for p in points]).T
        self.ax.plot(x, y, 'o', markersize=markersize, color=color,
                     zorder=zorder)

    def draw_hull(
        self,
        hull: t.List[data.Point],
        colors: str = 'red',
        linewidths: float = 1.0,
        zorder: float = 2,
    ):
        if len(hull) < 3:
            return
        ring = LinearRing([p.coords for p in hull])
        drawn_hull = PathCollection(
            [Path(np.array(ring.coords))],
            linewidths=linewidths,
            edgecolors=colors,
            facecolors='none',
            zorder=zorder)
        self.ax.add_collection(drawn_hull)
        self.ax.autoscale_view()

    def save(self, file_name="hull.png", file_format="png"):
        self.fig.savefig(file_name, format=file_format)

    def close(self):
        plt.close(self.fig)

    @classmethod
    def show(cls):
        plt.show()
