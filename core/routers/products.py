"""
Products API Router

Public catalog reads; writes require an admin session.
"""

from fastapi import APIRouter, Depends, HTTPException

from core.auth.dependencies import verify_admin
from core.errors import ERROR_PRODUCT_NOT_FOUND
from core.logging import get_logger, sanitize_id_for_logging
from core.services.database import get_database

from .models import ProductRequest, UpdateProductRequest

logger = get_logger(__name__)

router = APIRouter(tags=["products"])


# ==================== PUBLIC PRODUCTS API ====================

@router.get("/products")
async def get_products():
    """Get all products (public)"""
    db = get_database()
    products = await db.get_products()
    return {"products": [p.public() for p in products]}


@router.get("/products/{product_id}")
async def get_product(product_id: int):
    """Get product by ID (public)"""
    db = get_database()
    product = await db.get_product(product_id)

    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    return {"product": product.public()}


# ==================== ADMIN PRODUCTS API ====================

@router.post("/products", status_code=201)
async def create_product(request: ProductRequest, admin=Depends(verify_admin)):
    db = get_database()
    product = await db.create_product(request.model_dump())
    logger.info("Product %s created", sanitize_id_for_logging(product.id))
    return {"message": "Product created successfully", "product": product.public()}


@router.put("/products/{product_id}")
async def update_product(
    product_id: int,
    request: UpdateProductRequest,
    admin=Depends(verify_admin)
):
    db = get_database()
    product = await db.update_product(product_id, request.model_dump(exclude_unset=True, exclude_none=True))

    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    return {"message": "Product updated successfully", "product": product.public()}


@router.delete("/products/{product_id}")
async def delete_product(product_id: int, admin=Depends(verify_admin)):
    db = get_database()
    if not await db.delete_product(product_id):
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    logger.info("Product %s deleted", sanitize_id_for_logging(product_id))
    return {"message": "Product deleted successfully"}
