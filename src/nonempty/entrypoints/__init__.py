"""Entrypoints (inbound adapters) for nonempty.

Expose the library to the outside world through the command line. Parse and
validate inputs, call into `nonempty.domain`, and present results.
"""
