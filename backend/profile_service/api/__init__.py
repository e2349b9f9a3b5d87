"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Error bodies are plain text; success bodies are JSON

Design Decisions:
    - Thin routes delegate to core/ and services/
"""
