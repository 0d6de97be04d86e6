"""End-to-end tests of the installed ``nonempty`` command group."""
