"""Packaging correctness verification for nw-similarity.

Tests validate:
- Base install imports cleanly and the public functions work
- py.typed marker ships with the package
- Pytest plugin entry point is registered
- Package metadata is correct
"""

from __future__ import annotations

from pathlib import Path


class TestBaseInstallNoImportError:
    """Verify base install imports without error."""

    def test_import_nw_similarity(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import nw_similarity

        assert hasattr(nw_similarity, "edit_distance")
        assert hasattr(nw_similarity, "edit_distance_parallel")
        assert hasattr(nw_similarity, "similarity_percentage")
        assert hasattr(nw_similarity, "compare")

    def test_similarity_basic(self):  # type: ignore[no-untyped-def]
        """similarity_percentage() works with default arguments."""
        from nw_similarity import similarity_percentage

        assert similarity_percentage("abc", "abc") == 100.0

    def test_algorithm_subpackage_import(self):  # type: ignore[no-untyped-def]
        """algorithm subpackage exposes the engines."""
        from nw_similarity.algorithm import cost_matrix, edit_distance

        assert edit_distance("a", "b") == 1
        assert cost_matrix("a", "b").shape == (2, 2)

    def test_py_typed_marker_present(self):  # type: ignore[no-untyped-def]
        """py.typed marker sits next to the package __init__."""
        import nw_similarity

        package_dir = Path(nw_similarity.__file__).parent
        assert (package_dir / "py.typed").exists()


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for nw-similarity."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")
        nw_eps = [ep for ep in pytest11_eps if "nw_similarity" in str(ep.value)]
        assert nw_eps, (
            f"No pytest11 entry point found for nw-similarity. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_sequences_similar fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("nw_similarity.integrations._pytest_plugin")
        assert hasattr(mod, "assert_sequences_similar")
        assert callable(mod.assert_sequences_similar)


class TestPackageMetadata:
    """Verify package metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        """Package version must be 0.1.0."""
        import nw_similarity

        assert nw_similarity.__version__ == "0.1.0"

    def test_distribution_version(self):  # type: ignore[no-untyped-def]
        """Installed distribution metadata matches __version__."""
        from importlib.metadata import version

        assert version("nw-similarity") == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import nw_similarity

        expected = {
            "AlignmentConfig",
            "AlignmentResult",
            "EngineMode",
            "SequenceComparator",
            "compare",
            "edit_distance",
            "edit_distance_parallel",
            "is_similar",
            "similarity_percentage",
        }
        actual = set(nw_similarity.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
