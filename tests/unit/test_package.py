"""Tests for package-level modules."""

import ast
import importlib.util
from pathlib import Path

import credgen


class TestPackage:
    """Tests for the credgen package layout."""

    def test_main_module_has_docstring(self):
        """``python -m credgen`` entry module is documented."""
        spec = importlib.util.find_spec("credgen.__main__")
        source = Path(spec.origin).read_text()

        assert ast.get_docstring(ast.parse(source))

    def test_public_api(self):
        """The documented names are exported from the package root."""
        for name in ("generate_oauth_credentials", "generate_random_string", "ValidationError"):
            assert name in credgen.__all__
            assert hasattr(credgen, name)
