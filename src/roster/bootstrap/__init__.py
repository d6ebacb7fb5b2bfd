"""Bootstrap (composition root) for ROSTER.

Assembles the application at runtime: builds the in-memory directory, wires it
into the service-layer handlers, and exposes the query facade to entrypoints.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `roster.adapters`, `roster.service_layer`,
  `roster.interfaces`, `roster.domain`, and `roster.config`.
- Inner layers must not import `roster.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""
