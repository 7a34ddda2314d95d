"""
FARS - Fatality Analysis Reporting System tools

A small Python package for yearly FARS accident files using the
Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file resolution, reading, multi-year batches)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : (summary output, state maps)
"""

__version__ = "0.1.0"
