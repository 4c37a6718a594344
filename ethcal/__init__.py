"""
ethcal package
==============

Ethiopian / Gregorian calendar engine.

- The CLI entry point is in `ethcal/cli.py`.
- Date conversion is in `ethcal/converter.py`.
- Calendar grids (month/year layouts with holidays) are in `ethcal/grid.py`.
"""

__version__ = '0.3.1'
