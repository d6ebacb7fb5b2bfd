"""Contract tests.

The department and employee collection contracts are written once and run
against every adapter listed in the `collection` fixture.
"""
