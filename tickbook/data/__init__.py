"""
Data ingestion and indexing module.

Handles parsing of delimited market record lines, fault-tolerant loading of
record sources, and the time-indexed store that answers snapshot queries.
"""
