"""
Utility functions module.

Time Semantics:
- Record timestamps are opaque, fixed-width strings
- Lexicographic order of timestamps must equal chronological order
- Parsing into datetime is only done for validation, never for indexing
"""
