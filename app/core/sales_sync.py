"""
Sales service sync: best-effort notification of vehicle changes.
POSTs a flat vehicle snapshot to the sales service. Every failure is logged and swallowed;
there is no retry, so delivery is at most once.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from app.core.config import settings
from app.models.vehicle import Vehicle

logger = logging.getLogger(__name__)

SYNC_PATH = "/api/internal/vehicles/sync"


def build_sync_payload(vehicle: Vehicle) -> Dict[str, Any]:
    """Flat snapshot sent to the sales service. Price goes out as a plain number."""
    return {
        "id": str(vehicle.id),
        "brand": vehicle.brand,
        "model": vehicle.model,
        "year": vehicle.year,
        "color": vehicle.color,
        "price": float(vehicle.price),
        "status": vehicle.status,
    }


class SalesServiceSync:
    """Pooled async client for the sales service sync endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or settings.sales_service_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.SALES_SYNC_TIMEOUT_SECONDS
        self._client = client or httpx.AsyncClient()
        self._owns_client = client is None

    @property
    def sync_url(self) -> str:
        return f"{self.base_url}{SYNC_PATH}"

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def sync_vehicle(self, vehicle: Vehicle) -> bool:
        """
        Send the vehicle snapshot. Returns True on a 2xx response and False otherwise.
        Never raises: the triggering operation must not depend on the outcome.
        """
        try:
            payload = build_sync_payload(vehicle)
            response = await self._client.post(self.sync_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Failed to sync vehicle %s to sales service: status=%s status_text=%s message=%s",
                vehicle.id,
                e.response.status_code,
                e.response.reason_phrase,
                e,
            )
            return False
        except httpx.HTTPError as e:
            logger.error(
                "Failed to sync vehicle %s to sales service: %s: %s",
                vehicle.id,
                type(e).__name__,
                e,
            )
            return False
        except Exception as e:
            logger.error("Failed to sync vehicle %s to sales service: %s", vehicle.id, e, exc_info=True)
            return False

        logger.info("Vehicle synced successfully: %s", vehicle.id)
        return True
