"""
Frame Loop Viewer
=================
Runs one layout step per rendered frame and keeps the camera on the
centroid of the layout.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import pyvista as pv

from forcelayout.view.render_hook import PyVistaRenderHook

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

    from forcelayout.model.graph import Graph

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = "#efefef"


def create_plotter(**kwargs) -> tuple[pv.Plotter, PyVistaRenderHook]:
    """Create a plotter and a render hook drawing into it."""
    plotter = pv.Plotter(**kwargs)
    plotter.set_background(BACKGROUND_COLOR)
    plotter.camera.position = (0.0, 0.0, -250.0)
    plotter.camera.focal_point = (0.0, 0.0, 0.0)
    return plotter, PyVistaRenderHook(plotter)


def follow_center(camera, center: Optional[npt.NDArray[np.float64]], zoom: float) -> None:
    """Keep the camera at a fixed depth offset from ``center``, looking at it."""
    if center is None:
        return
    x, y, _ = camera.position
    camera.position = (x, y, float(center[2]) - zoom)
    camera.focal_point = tuple(float(c) for c in center)


def run_viewer(graph: Graph, plotter: pv.Plotter, frames: Optional[int] = None) -> int:
    """
    Advance and draw the layout until the window closes.

    Args:
        graph: Graph whose hook draws into ``plotter``.
        plotter: The plotter to render with.
        frames: Stop after this many frames. None runs until the window closes.

    Returns:
        Number of frames rendered.
    """
    logger.info(f"Starting viewer: {graph}")
    plotter.show(interactive_update=True, auto_close=False)

    frame = 0
    while frames is None or frame < frames:
        if plotter.render_window is None:
            break
        graph.layout()
        follow_center(plotter.camera, graph.center, graph.config.zoom)
        plotter.update()
        frame += 1

    logger.info(f"Viewer stopped after {frame} frames.")
    return frame
