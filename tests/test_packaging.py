"""
tests/test_packaging.py - ProBet Tracker
========================================
Checks on pyproject.toml metadata.

Run: pytest tests/test_packaging.py -v
"""

import os
import re

ROOT = os.path.join(os.path.dirname(__file__), "..")


def _pyproject() -> str:
    with open(os.path.join(ROOT, "pyproject.toml"), encoding="utf-8") as fh:
        return fh.read()


class TestProjectMetadata:
    def test_no_design_notes_as_long_description(self):
        assert not re.search(r'^readme\s*=\s*"DESIGN\.md"', _pyproject(), re.M)

    def test_declared_readme_exists(self):
        m = re.search(r'^readme\s*=\s*"([^"]+)"', _pyproject(), re.M)
        if m:
            assert os.path.exists(os.path.join(ROOT, m.group(1)))

    def test_plotly_is_a_runtime_dependency(self):
        assert '"plotly' in _pyproject()
