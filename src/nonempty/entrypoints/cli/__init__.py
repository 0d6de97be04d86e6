"""The ``nonempty`` command-line interface."""
