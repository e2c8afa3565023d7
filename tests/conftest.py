import sys
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

sys.path.append(str(Path(__file__).parents[1] / "src"))

from icon_catalog.api.deps import get_catalog_service
from icon_catalog.main import app
from icon_catalog.services.catalog import CatalogService

SAMPLE_ICONS = [
    "ArrowUpRight",
    "ChatNotificationBell",
    "ClockHistory",
    "Lock",
    "SettingsGear",
    "TrashCan",
    "Widget123XYZ",
]


@pytest.fixture
def icons_dir(tmp_path: Path) -> Path:
    """Directory of empty SVG files named after SAMPLE_ICONS, plus noise."""
    directory = tmp_path / "icons"
    directory.mkdir()
    for name in SAMPLE_ICONS:
        (directory / f"{name}.svg").write_text("<svg/>")
    (directory / "README.md").write_text("not an icon")
    (directory / "nested").mkdir()
    return directory


@pytest.fixture
def service() -> CatalogService:
    return CatalogService()


@pytest.fixture
async def client(service: CatalogService):
    """Provide test client with the default catalog service."""
    app.dependency_overrides[get_catalog_service] = lambda: service

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
