"""Functional tests.

Black-box checks of the `roster` command as a user meets it: help output,
version, and short shell sessions.
"""
