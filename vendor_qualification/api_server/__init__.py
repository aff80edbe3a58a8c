"""
API server package: HTTP interface over the qualification engine.

Validates request shapes (pydantic) before anything reaches the engine, and
returns the engine's envelopes as JSON.
"""
