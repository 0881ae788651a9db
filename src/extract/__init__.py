"""
Extract Layer - Pure I/O to External APIs

This layer handles all external data fetching with no business logic.
- No imports from transform or orchestration layers
- Returns raw country records or a flat table of them
- Handles retries and error handling for the REST Countries API
"""
