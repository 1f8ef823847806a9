"""Tests for the top-level cldrplural package surface."""

import cldrplural
from cldrplural import runtime, syntax


class TestPublicApi:
    """Exports and metadata."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is an attribute of the package."""
        for name in cldrplural.__all__:
            assert hasattr(cldrplural, name), name

    def test_version_is_string(self) -> None:
        """__version__ comes from package metadata or the dev fallback."""
        assert isinstance(cldrplural.__version__, str)
        assert cldrplural.__version__

    def test_spec_url(self) -> None:
        """The rule syntax reference points at UTS #35."""
        assert cldrplural.__cldr_spec_url__.startswith("https://unicode.org/reports/tr35/")

    def test_subpackage_exports(self) -> None:
        """Subpackages re-export their building blocks."""
        for module in (runtime, syntax):
            for name in module.__all__:
                assert hasattr(module, name), f"{module.__name__}.{name}"

    def test_quick_use(self) -> None:
        """The documented one-liners work."""
        assert cldrplural.evaluate_rule("n is 1", 1) is True
        assert cldrplural.select_plural_category(1, "en") == "one"
