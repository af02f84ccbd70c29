"""
Product CRUD API routes

Every handler maps to exactly one ProductsService call, and therefore one
SQL statement. A missing row is answered with an empty-bodied 404.
"""

import logging
from typing import Annotated, List
import asyncpg
from fastapi import APIRouter, HTTPException, Depends, Path, Response

from models.product import ProductCreateRequest, ProductUpdateRequest, ProductResponse
from services.products_service import ProductsService, get_products_service

router = APIRouter()
logger = logging.getLogger(__name__)

# Ids are SERIAL (int4) in the store
ProductId = Annotated[int, Path(ge=-2147483648, le=2147483647, description="Product id")]


@router.get("", response_model=List[ProductResponse])
async def list_products(
    products_service: ProductsService = Depends(get_products_service)
):
    """List all products, newest first"""
    try:
        result = await products_service.list_products()
    except asyncpg.PostgresError as e:
        logger.error(f"Failed to list products: {e}")
        raise HTTPException(status_code=500, detail="Database error")
    
    return [ProductResponse.from_record(row) for row in result.data]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: ProductId,
    products_service: ProductsService = Depends(get_products_service)
):
    """Get product by ID"""
    try:
        result = await products_service.get_product_by_id(product_id)
    except asyncpg.PostgresError as e:
        logger.error(f"Failed to get product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Database error")
    
    if not result.success:
        return Response(status_code=404)
    
    return ProductResponse.from_record(result.data[0])


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(
    request: ProductCreateRequest,
    response: Response,
    products_service: ProductsService = Depends(get_products_service)
):
    """Create a new product"""
    try:
        result = await products_service.create_product(
            name=request.name,
            description=request.description,
            price=request.price
        )
    except asyncpg.PostgresError as e:
        logger.error(f"Failed to create product: {e}")
        raise HTTPException(status_code=500, detail="Database error")
    
    if not result.success:
        raise HTTPException(status_code=500, detail="Insert returned no row")
    
    product = ProductResponse.from_record(result.data[0])
    response.headers["Location"] = f"/products/{product.id}"
    return product


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    request: ProductUpdateRequest,
    product_id: ProductId,
    products_service: ProductsService = Depends(get_products_service)
):
    """Replace name, description and price of a product"""
    try:
        result = await products_service.update_product(
            product_id,
            name=request.name,
            description=request.description,
            price=request.price
        )
    except asyncpg.PostgresError as e:
        logger.error(f"Failed to update product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Database error")
    
    if not result.success:
        return Response(status_code=404)
    
    return ProductResponse.from_record(result.data[0])


@router.delete("/{product_id}", status_code=204, response_class=Response)
async def delete_product(
    product_id: ProductId,
    products_service: ProductsService = Depends(get_products_service)
):
    """Delete a product permanently"""
    try:
        result = await products_service.delete_product(product_id)
    except asyncpg.PostgresError as e:
        logger.error(f"Failed to delete product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Database error")
    
    if not result.success:
        return Response(status_code=404)
    
    return Response(status_code=204)
