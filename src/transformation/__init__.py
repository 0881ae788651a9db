"""
Transformation Layer - Pure, Deterministic Functions

This layer contains all query logic over the flat country table.
- Pure functions (input → output)
- No I/O operations
- Unit testable
- Deterministic results for a given input order
"""
