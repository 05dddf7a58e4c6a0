from fastapi import APIRouter, Depends

from cashier.core.errors import NotFoundError
from cashier.dependencies import get_product_service
from cashier.schemas.base import ApiResult
from cashier.schemas.product import (
    ProductCreate,
    ProductData,
    ProductSaved,
    ProductUpdate,
    StockUpdated,
    StockUpdateRequest,
)
from cashier.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=list[ProductData])
def list_products(service: ProductService = Depends(get_product_service)):
    return service.get_active()


@router.get("/barcode/{barcode}", response_model=ProductData)
def get_product_by_barcode(barcode: str, service: ProductService = Depends(get_product_service)):
    product = service.get_by_barcode(barcode)
    if product is None:
        raise NotFoundError("Product not found")
    return product


@router.get("/{product_id}", response_model=ProductData)
def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    product = service.get_by_id(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


@router.post("", response_model=ProductSaved)
def save_product(payload: ProductCreate, service: ProductService = Depends(get_product_service)):
    product = ProductData(**payload.model_dump())
    service.create(product)
    return ProductSaved(message="Product saved successfully", id=product.id)


@router.put("/{product_id}", response_model=ApiResult)
def update_product(
    product_id: str,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    """Full replace: every mutable field is written, stock included. Omitted fields take their defaults."""
    product = ProductData(**payload.model_dump(exclude={"id"}))
    product.id = product_id
    service.update(product)
    return ApiResult(message="Product updated successfully")


@router.put("/{product_id}/stock", response_model=StockUpdated)
def update_product_stock(
    product_id: str,
    payload: StockUpdateRequest,
    service: ProductService = Depends(get_product_service),
):
    operation, quantity = payload.to_adjustment()
    new_stock = service.adjust_stock(product_id, operation, quantity)
    return StockUpdated(message="Product stock updated successfully", new_stock=new_stock)


@router.delete("/{product_id}", response_model=ApiResult)
def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
    service.soft_delete(product_id)
    return ApiResult(message="Product deleted successfully")


__all__ = ["router"]
