"""nonempty test suite.

Layout
- unit/  : The container, the collect protocol and the CLI helpers, in process.
- e2e/   : The ``nonempty`` command driven through Click's CliRunner.

Property-based tests (hypothesis) sit next to the example-based tests for the
same module and carry ``@pytest.mark.property``. Markers ``unit`` and ``e2e``
are added automatically by the conftest of each folder.
"""
