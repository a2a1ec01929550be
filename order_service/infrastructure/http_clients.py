import httpx
import logging
from typing import Optional

from order_service.application.interfaces import ProductGateway
from order_service.domain.models import ProductSnapshot
from order_service.domain.exceptions import ProductServiceUnavailableError

logger = logging.getLogger(__name__)


class HTTPProductClient(ProductGateway):
    """Product service client.

    Reads degrade to ``ProductSnapshot.fallback`` when the service cannot
    answer; stock decrements raise ``ProductServiceUnavailableError``.
    """

    def __init__(
        self,
        base_url: str,
        api_token: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self._base_url = base_url.rstrip("/")
        self._api_token = api_token
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers={"X-API-Key": self._api_token},
            timeout=self._timeout,
            transport=self._transport
        )

    async def get_product(self, product_id: int) -> ProductSnapshot:
        try:
            async with self._client() as client:
                response = await client.get(f"/products/{product_id}")

            if response.status_code == 200:
                return ProductSnapshot.model_validate(response.json())
            logger.warning(f"Product service returned {response.status_code} for product {product_id}, using fallback")

        except httpx.RequestError as e:
            logger.error(f"Product service connection error: {e}")
        except ValueError as e:
            logger.error(f"Product service sent an unreadable product {product_id}: {e}")

        return ProductSnapshot.fallback(product_id)

    async def reduce_quantity(self, product_id: int, amount: int) -> None:
        try:
            async with self._client() as client:
                response = await client.post(
                    f"/products/{product_id}/reduceQuantity",
                    params={"quantity": amount}
                )
        except httpx.RequestError as e:
            logger.error(f"Product service connection error while reducing {product_id}: {e}")
            raise ProductServiceUnavailableError()

        if not response.is_success:
            logger.error(f"Product service refused to reduce {product_id} by {amount}: {response.status_code}")
            raise ProductServiceUnavailableError()

        logger.info(f"Reserved {amount} of product {product_id}")
