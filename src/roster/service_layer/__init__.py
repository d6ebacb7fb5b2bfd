"""Service layer for ROSTER.

Implements the query language: parsing text into commands, routing commands to
handlers, and executing them against the directory.

Dependency rule: may import `roster.domain` and `roster.interfaces`, but not
`roster.adapters` or `roster.entrypoints`.
"""
