"""pytest plugin for nw-similarity.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from nw_similarity import AlignmentConfig, compare


@pytest.fixture(scope="session")
def assert_sequences_similar() -> Any:
    """Fixture that returns a callable sequence similarity asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh SequenceComparator per call).

    Usage in tests::

        def test_typo(assert_sequences_similar):
            assert_sequences_similar("kitten", "kitten!")

        def test_unrelated(assert_sequences_similar):
            with pytest.raises(AssertionError, match=r"similarity="):
                assert_sequences_similar("abc", "xyz")

    Returns:
        A callable ``_assert(actual, expected, threshold=None, config=None) -> None``
        that raises ``AssertionError`` when the similarity percentage is below
        threshold.  ``threshold`` defaults to ``config.similarity_threshold``.
    """

    def _assert(
        actual: Any,
        expected: Any,
        threshold: float | None = None,
        config: AlignmentConfig | None = None,
    ) -> None:
        config = config if config is not None else AlignmentConfig()
        if threshold is None:
            threshold = config.similarity_threshold
        result = compare(actual, expected, config=config)
        if result.similarity_percentage < threshold:
            raise AssertionError(
                f"Sequences not similar: "
                f"similarity={result.similarity_percentage:.4f} < threshold={threshold}\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}\n"
                f"  distance: {result.distance}\n"
                f"  lengths:  {result.len_a} / {result.len_b}"
            )

    return _assert
