"""Unit tests.

No subprocesses and no real terminal; file output goes to ``tmp_path``.
"""
