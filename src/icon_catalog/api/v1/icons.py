"""Icon classification and catalog endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from icon_catalog.api.deps import get_catalog_service
from icon_catalog.config import settings
from icon_catalog.schemas.icon import (
    CatalogResponse,
    CategoryInfo,
    ClassifyRequest,
    ClassifyResponse,
    IconRecord,
)
from icon_catalog.services.catalog import CatalogService

router = APIRouter(prefix="/icons", tags=["icons"])


@router.get(
    "/categories",
    response_model=list[CategoryInfo],
    summary="List the category taxonomy",
)
async def list_categories(
    service: CatalogService = Depends(get_catalog_service),
) -> list[CategoryInfo]:
    """Categories in evaluation order with their keywords. Other is always last."""
    return service.category_info()


@router.get(
    "/catalog",
    response_model=CatalogResponse,
    summary="Build the catalog from the configured icon directory",
)
def get_catalog(
    service: CatalogService = Depends(get_catalog_service),
) -> CatalogResponse:
    """
    Scan the configured icon directory and return every icon grouped by
    category, plus summary statistics.

    Raises ICON_001 (404) when the directory does not exist.
    """
    catalog = service.build_from_directory(settings.icons_dir, settings.icon_extension)
    return CatalogResponse(catalog=catalog, summary=service.summarize(catalog))


@router.get(
    "/catalog/{name}",
    response_model=IconRecord,
    summary="Look up one icon in the configured icon directory",
)
def get_catalog_icon(
    name: str,
    service: CatalogService = Depends(get_catalog_service),
) -> IconRecord:
    """Raises ICON_005 (404) when no icon file with this name exists."""
    return service.find_in_directory(settings.icons_dir, name, settings.icon_extension)


@router.post(
    "/classify",
    response_model=ClassifyResponse,
    summary="Classify and tag a batch of icon identifiers",
)
async def classify_icons(
    request: ClassifyRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> ClassifyResponse:
    """Records are returned in request order; duplicates are kept."""
    return ClassifyResponse(icons=[service.build_record(name) for name in request.identifiers])


@router.get(
    "/{identifier}",
    response_model=IconRecord,
    summary="Classify and tag a single icon identifier",
)
async def get_icon(
    identifier: Annotated[str, Path(min_length=1, max_length=200, description="Icon identifier")],
    service: CatalogService = Depends(get_catalog_service),
) -> IconRecord:
    """
    The literal identifiers `categories` and `catalog` are taken by the routes
    above; classify them with POST /classify instead.
    """
    return service.build_record(identifier)
