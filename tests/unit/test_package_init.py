"""Tests for minigrep package-level exports."""
from __future__ import annotations


class TestPackageExports:

    def test_public_api(self):
        import minigrep

        for name in minigrep.__all__:
            assert hasattr(minigrep, name)

    def test_search_reexported(self):
        from minigrep import search
        from minigrep.core.search import search as core_search

        assert search is core_search
