import pytest

from tintthat.models import failure as failure_module
from tintthat.models.collection import Collection
from tintthat.models.color import Color
from tintthat.models.palette import Palette
from tintthat.store.location import StoreLocation, init_store


@pytest.fixture(autouse=True)
def clear_finalized_responses():
    """Clear the finalized responses set between tests.

    This prevents test isolation issues where Python reuses memory
    addresses for new objects, causing id() collisions with previously
    finalized responses.
    """
    failure_module._finalized_responses.clear()
    yield
    failure_module._finalized_responses.clear()


@pytest.fixture
def location(tmp_path) -> StoreLocation:
    """Storage rooted in a temporary directory."""
    return init_store(StoreLocation(root=tmp_path / "data"))


@pytest.fixture
def sample_collection() -> Collection:
    """Collection with two palettes of three and two colors."""
    return Collection(
        title="Vacation",
        palettes=[
            Palette(
                title="Beach",
                colors=[Color(255, 0, 0), Color(0, 255, 0), Color(0, 0, 255, 128)],
            ),
            Palette(title="Forest", colors=[Color(10, 20, 30), Color(40, 50, 60)]),
        ],
    )
