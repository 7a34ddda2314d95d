"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, the functional core and plotting.
No analysis logic lives here: this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    maps:    map_state() – load, validate, filter, clean and draw one
             state's accidents for one year.
    summary: write_summary() – persist a SummaryTable as CSV or HTML.
"""

from .maps import map_state
from .summary import write_summary

__all__ = [
    'map_state',
    'write_summary',
]
