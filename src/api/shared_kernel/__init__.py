"""Shared kernel.

The error taxonomy, input validation helpers and bearer-token primitives
that iam, catalogue and ordering all agree to depend on. Nothing in here
may import from a bounded context.
"""
