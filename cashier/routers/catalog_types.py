from fastapi import APIRouter, Depends

from cashier.dependencies import get_catalog_enumeration
from cashier.services.catalog_types import CatalogEnumeration

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get("/producttypes", response_model=list[str])
def list_product_types(catalog: CatalogEnumeration = Depends(get_catalog_enumeration)):
    return catalog.list_categories()


@router.get("/unittypes", response_model=list[str])
def list_unit_types(catalog: CatalogEnumeration = Depends(get_catalog_enumeration)):
    return catalog.list_unit_types()


__all__ = ["router"]
