"""Unit tests.

Each module checks one piece of ROSTER (name rules, a collection adapter, the
parser, a handler, the bus, a CLI helper) against in-memory objects only.
"""
