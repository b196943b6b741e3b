"""
Result models for derived statistics.
"""
