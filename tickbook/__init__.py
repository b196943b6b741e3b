"""
tickbook - Time-Indexed Market Record Engine

Ingests time-stamped market records from delimited text feeds, indexes them
by (market, timestamp) and answers the snapshot queries a trading-simulation
front end needs: per-side orders, best prices, time navigation and summary
statistics over a time window.
"""

__version__ = "0.1.0"
__author__ = "tickbook Team"
