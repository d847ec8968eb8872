import itertools
from datetime import datetime, timezone

import pytest

from trustlens.services.fingerprint_service import generate_fingerprint


NEUTRAL_REVIEW = (
    "I bought this kettle for my office last month and it has held up well so far. "
    "The handle stays cool and the lid opens with one hand. "
    "It boils water in about four minutes which is fine for me. "
    "My only gripe is the short cord near the socket."
)

CAREFUL_BEHAVIOR = {
    "writingTime": 120000,
    "revisionsCount": 4,
    "sessionDuration": 180000,
}


@pytest.fixture
def fixed_now():
    """A Wednesday afternoon, outside the unusual-hours window."""
    return datetime(2026, 10, 21, 14, 5, tzinfo=timezone.utc)


@pytest.fixture
def id_factory():
    """Deterministic fingerprint ids: fp-1, fp-2, ..."""
    counter = itertools.count(1)
    return lambda: f"fp-{next(counter)}"


@pytest.fixture
def neutral_text():
    """A plain 50-word review that trips no text rule."""
    return NEUTRAL_REVIEW


@pytest.fixture
def careful_behavior():
    """Typing behavior of someone who took their time."""
    return dict(CAREFUL_BEHAVIOR)


@pytest.fixture
def neutral_fingerprint(neutral_text, careful_behavior, fixed_now, id_factory):
    """Fingerprint that scores a clean 100."""
    return generate_fingerprint(
        neutral_text, careful_behavior, now=fixed_now, id_factory=id_factory
    )


@pytest.fixture
def make_fingerprint(fixed_now, id_factory):
    """Factory for fingerprints on the fixed clock."""
    def _make(text, behavior=None, now=None):
        return generate_fingerprint(
            text, behavior, now=now or fixed_now, id_factory=id_factory
        )
    return _make
