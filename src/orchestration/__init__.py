"""
Orchestration Layer - Query Coordination

This layer exposes the public country queries.
- One fetch per query call
- No business logic of its own
- Composes the extract and transform layers
"""
