"""Domain layer for ROSTER.

Pure helpers with no dependencies on adapters, the service layer, or entrypoints.
"""
