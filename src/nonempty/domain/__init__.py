"""Domain layer for nonempty.

Contains the non-empty container, the count type used by its shrinking
operations, the collect protocol and the error taxonomy. This package is
free of I/O and framework code.

Dependency rule: do not import from `nonempty.entrypoints`.
"""
