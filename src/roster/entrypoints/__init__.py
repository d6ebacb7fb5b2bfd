"""Entrypoints (inbound adapters) for ROSTER.

Expose the application to the outside world: the command-line interface and its
interactive shell. Read query text, hand it to the query facade, and present the
responses.

Dependency rule: may import `roster.service_layer` and `roster.bootstrap`; avoid
importing `roster.adapters` directly.
"""
