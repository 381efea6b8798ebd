"""
Data access layer.

Design rules:
- The runner talks to the warehouse ONLY through a client with `execute` / `query`.
- One warehouse session per statement.
- No env var reads here (config-only).
"""
