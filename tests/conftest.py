from pathlib import Path

import pytest

from colonconf import Conf, loads

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def sample_path() -> Path:
    return DATA_DIR / "sample.conf"


@pytest.fixture
def parse():
    """Parse text, failing the test on any parse error."""

    def _parse(text: str, **kwargs) -> Conf:
        conf, err = loads(text, **kwargs)
        assert err is None, err
        return conf

    return _parse
