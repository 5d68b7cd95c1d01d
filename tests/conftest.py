"""Pytest configuration and shared fixtures."""
import pytest
from fixtures.recording_reporter import RecordingReporter

from intensor.domain.entities.tensor import Tensor


@pytest.fixture
def recording_reporter():
    """
    Provide a RecordingReporter instance for tests.

    Returns:
        RecordingReporter: A new reporter with no recorded events.
    """
    return RecordingReporter()


@pytest.fixture
def vector():
    """Rank-1 tensor [1, 2, 3, 4]."""
    return Tensor([1, 2, 3, 4], [4])


@pytest.fixture
def matrix():
    """Rank-2 tensor [[1, 2], [3, 4]]."""
    return Tensor([1, 2, 3, 4], [2, 2])


@pytest.fixture
def rectangular():
    """Rank-2 tensor [[1, 2, 3], [4, 5, 6]]."""
    return Tensor([1, 2, 3, 4, 5, 6], [2, 3])
