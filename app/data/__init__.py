"""
Data access layer.

Design rules:
- Views call ONLY functions in this package.
- Reads degrade to empty results; writes raise StorageError.
- No env var reads here (config-only).
"""
