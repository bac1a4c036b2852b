"""Catalog API routes for the print store"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Depends

from ..models.product import CatalogName, CatalogResponse, Product
from ..services.catalog import CatalogLoader, CatalogRegistry
from ..core.dependencies import get_catalogs

router = APIRouter(tags=["Catalog"])


def _catalog_response(
    loader: CatalogLoader,
    category: Optional[str] = None,
) -> CatalogResponse:
    state = loader.state
    products = state.products
    if category:
        products = [
            p for p in products
            if p.category and p.category.lower() == category.lower()
        ]

    return CatalogResponse(
        catalog=loader.name,
        products=products,
        loading=state.loading,
        error=state.error,
        source=state.source,
        total=len(products),
    )


def _get_product_or_404(loader: CatalogLoader, product_id: str) -> Product:
    product = loader.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("/api/products", response_model=CatalogResponse)
async def list_prints(
    category: Optional[str] = Query(None, description="Filter by category"),
    catalogs: CatalogRegistry = Depends(get_catalogs),
):
    """
    List the print store catalog.

    The response carries the load status, so clients can tell live sheet
    data from the static fallback.
    """
    return _catalog_response(catalogs.get(CatalogName.PRINTS), category)


@router.get("/api/products/{product_id}", response_model=Product)
async def get_print(
    product_id: str,
    catalogs: CatalogRegistry = Depends(get_catalogs),
):
    """Get a print by ID"""
    return _get_product_or_404(catalogs.get(CatalogName.PRINTS), product_id)


@router.get("/api/limited-edition", response_model=CatalogResponse)
async def list_limited_edition(
    category: Optional[str] = Query(None, description="Filter by category"),
    catalogs: CatalogRegistry = Depends(get_catalogs),
):
    """List the limited edition catalog"""
    return _catalog_response(catalogs.get(CatalogName.LIMITED_EDITION), category)


@router.get("/api/limited-edition/{product_id}", response_model=Product)
async def get_limited_edition(
    product_id: str,
    catalogs: CatalogRegistry = Depends(get_catalogs),
):
    """Get a limited edition print by ID"""
    return _get_product_or_404(catalogs.get(CatalogName.LIMITED_EDITION), product_id)


@router.post("/api/catalogs/{name}/refresh", response_model=CatalogResponse)
async def refresh_catalog(
    name: CatalogName,
    catalogs: CatalogRegistry = Depends(get_catalogs),
):
    """Run one new load attempt against the catalog's sheet"""
    loader = catalogs.get(name)
    await loader.load()
    return _catalog_response(loader)
