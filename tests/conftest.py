"""Shared pytest fixtures for fcu2json tests."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any logging configuration done by the CLI between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def test_data_dir() -> Path:
    """Returns the path to the test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def good_config(test_data_dir: Path) -> Path:
    """FCU file with one module, one local user event and one node."""
    return test_data_dir / "good_fcu_data.xml"


@pytest.fixture
def bad_config(test_data_dir: Path) -> Path:
    """Same as good_config but the module lacks <moduleType>."""
    return test_data_dir / "bad_fcu_data.xml"


@pytest.fixture
def mixed_config(test_data_dir: Path) -> Path:
    """Namespaced FCU file with local, foreign and duplicate user events."""
    return test_data_dir / "mixed_events.xml"


@pytest.fixture
def empty_config(test_data_dir: Path) -> Path:
    """FCU file with modules but no user events or nodes."""
    return test_data_dir / "no_user_events.xml"


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Writes XML text to a temporary FCU file and returns its path."""

    def _write(xml: str, name: str = "fcu_config.xml") -> Path:
        path = tmp_path / name
        path.write_text(xml, encoding="utf-8")
        return path

    return _write
