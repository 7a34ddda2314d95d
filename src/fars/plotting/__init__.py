"""
FARS Plotting Package (Functional Core)

Pure plotting functions only – no file I/O, no side effects.
Every public function accepts plain sequences / DataFrames and returns a
``plotly.graph_objects.Figure``.

Modules:
    state_map: Per-state geographic scatter of fatal accident locations.
"""

from .state_map import plot_state_map

__all__ = [
    'plot_state_map',
]
