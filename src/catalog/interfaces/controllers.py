"""
Catalog Controllers (API Routes)
================================

FastAPI routes for product endpoints.

Controllers are thin - they delegate to the product service.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database import get_session
from src.catalog.application import (
    AddProductRequest,
    ProductResponse,
    ProductService,
    IProductService,
)
from src.catalog.infrastructure import SQLAlchemyProductDataService
from src.shared.api.routing import DecimalJSONRoute
from src.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/products", tags=["Products"], route_class=DecimalJSONRoute)


# ========== Dependencies ==========

async def get_product_service(
    session: AsyncSession = Depends(get_session)
) -> IProductService:
    """Build the product service on top of the request's session."""
    return ProductService(SQLAlchemyProductDataService(session))


# ========== Route Handlers ==========

@router.post(
    "/addproduct",
    response_model=ProductResponse,
    operation_id="AddProduct",
    summary="Add a product",
    responses={
        400: {"description": "Product could not be added"}
    }
)
async def add_product(
    request: Request,
    payload: AddProductRequest,
    service: IProductService = Depends(get_product_service)
):
    """Store a new product. The id in the response is assigned by the database."""
    correlation_id = getattr(request.state, "correlation_id", "unknown")

    response = await service.add_product(payload)
    if response is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)

    logger.info(
        "Product added",
        extra={"correlation_id": correlation_id, "product_id": response.id}
    )
    return response


@router.get(
    "/getproducts",
    response_model=List[ProductResponse],
    operation_id="GetProducts",
    summary="List all products",
    responses={
        404: {"description": "No product list available"}
    }
)
async def get_products(
    service: IProductService = Depends(get_product_service)
):
    """Return every product. An empty catalog is an empty list."""
    response = await service.get_products()
    if response is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return response


# Export router for inclusion in main app
catalog_router = router
