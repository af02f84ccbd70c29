"""
Base service layer for pooled, single-statement database operations
"""

import logging
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None


def _rows_affected(status: str) -> int:
    """Parse the row count from a command status tag such as 'DELETE 1'"""
    try:
        return int(status.split()[-1])
    except (AttributeError, IndexError, ValueError):
        return 0


class BaseService:
    """
    Base service that runs one parameterized statement per call.

    Each call checks a connection out of the pool and returns it on every
    exit path. Database exceptions are not caught here; they propagate to
    the caller as request-level failures.
    """
    
    def __init__(self, pool, resource_name: str):
        self.pool = pool
        self.resource_name = resource_name
    
    def _not_found(self, record_id: Any) -> ServiceResult:
        return ServiceResult(
            success=False,
            error=f"{self.resource_name} not found: {record_id}",
            error_type="RESOURCE_NOT_FOUND"
        )
    
    async def fetch_all(self, sql: str, *args) -> ServiceResult:
        """Run a query and return every row"""
        async with self.pool.acquire() as conn:
            records = await conn.fetch(sql, *args)
        
        data = [dict(record) for record in records]
        return ServiceResult(success=True, data=data, count=len(data))
    
    async def fetch_one(self, sql: str, *args, record_id: Any = None) -> ServiceResult:
        """Run a query expected to return at most one row"""
        async with self.pool.acquire() as conn:
            record = await conn.fetchrow(sql, *args)
        
        if record is None:
            return self._not_found(record_id)
        
        return ServiceResult(success=True, data=[dict(record)], count=1)
    
    async def execute(self, sql: str, *args, record_id: Any = None) -> ServiceResult:
        """Run a statement without a result set, failing when no row was affected"""
        async with self.pool.acquire() as conn:
            status = await conn.execute(sql, *args)
        
        affected = _rows_affected(status)
        if affected == 0:
            return self._not_found(record_id)
        
        return ServiceResult(success=True, count=affected)
