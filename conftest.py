import pytest

from test_strcodec import TestResult


@pytest.fixture
def r(request):
    """Result object the harness-style tests record their messages on."""
    return TestResult(request.node.name)
