"""Interfaces (ports) for ROSTER.

Abstract contracts implemented by adapters. Interfaces may import from
`roster.domain` but never from adapters, the service layer, or entrypoints.
"""
