"""
Products service - the five product operations, one SQL statement each
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Optional
from fastapi import Depends

from database.connection import get_db_pool
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = "Id AS id, Name AS name, Description AS description, Price AS price, CreatedAt AS created_at"

LIST_PRODUCTS_SQL = f"SELECT {PRODUCT_COLUMNS} FROM Products ORDER BY CreatedAt DESC"

GET_PRODUCT_SQL = f"SELECT {PRODUCT_COLUMNS} FROM Products WHERE Id = $1"

INSERT_PRODUCT_SQL = f"""
    INSERT INTO Products (Name, Description, Price, CreatedAt)
    VALUES ($1, $2, $3, $4)
    RETURNING {PRODUCT_COLUMNS}
"""

UPDATE_PRODUCT_SQL = f"""
    UPDATE Products
    SET Name = $2, Description = $3, Price = $4
    WHERE Id = $1
    RETURNING {PRODUCT_COLUMNS}
"""

DELETE_PRODUCT_SQL = "DELETE FROM Products WHERE Id = $1"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProductsService(BaseService):
    """Service for product CRUD operations"""
    
    def __init__(self, pool, clock: Optional[Callable[[], datetime]] = None):
        super().__init__(pool, "products")
        self.clock = clock or utc_now
    
    async def list_products(self) -> ServiceResult:
        """All products, newest first"""
        return await self.fetch_all(LIST_PRODUCTS_SQL)
    
    async def get_product_by_id(self, product_id: int) -> ServiceResult:
        return await self.fetch_one(GET_PRODUCT_SQL, product_id, record_id=product_id)
    
    async def create_product(
        self,
        name: str,
        description: Optional[str],
        price: Decimal
    ) -> ServiceResult:
        """
        Insert a new product
        
        created_at comes from the service clock so the response echoes
        exactly the value that was persisted.
        
        Args:
            name: Product name
            description: Optional description
            price: Unit price
            
        Returns:
            ServiceResult with the inserted row
        """
        created_at = self.clock()
        logger.info(f"Creating product: {name}")
        return await self.fetch_one(INSERT_PRODUCT_SQL, name, description, price, created_at)
    
    async def update_product(
        self,
        product_id: int,
        name: str,
        description: Optional[str],
        price: Decimal
    ) -> ServiceResult:
        """
        Replace the mutable fields of a product
        
        Id and CreatedAt are never written.
        
        Returns:
            ServiceResult with the updated row, or RESOURCE_NOT_FOUND
        """
        logger.info(f"Updating product {product_id}")
        return await self.fetch_one(
            UPDATE_PRODUCT_SQL, product_id, name, description, price,
            record_id=product_id
        )
    
    async def delete_product(self, product_id: int) -> ServiceResult:
        logger.info(f"Deleting product {product_id}")
        return await self.execute(DELETE_PRODUCT_SQL, product_id, record_id=product_id)


def get_products_service(pool=Depends(get_db_pool)) -> ProductsService:
    """FastAPI dependency building a service around the injected pool"""
    return ProductsService(pool)
