from __future__ import annotations

import pytest

from auweb.options import Options


@pytest.fixture
def opts() -> Options:
    return Options()
