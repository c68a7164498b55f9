"""In-memory product catalog.

Backs the product-code check and the price lookup collaborators.
"""

from collections.abc import Mapping

import structlog

from order_taking.domain.value_objects import Price, ProductCode
from order_taking.infrastructure.config import settings

logger = structlog.get_logger()


class ProductCatalog:
    """Known product codes and their unit prices."""

    def __init__(self, prices: Mapping[str, int]) -> None:
        """Initialize catalog.

        Args:
            prices: Product code -> unit price in minor units.

        Raises:
            ValueError: If any configured price is invalid.
        """
        self._prices: dict[str, Price] = {code: Price(amount) for code, amount in prices.items()}
        logger.info("Product catalog loaded", product_count=len(self._prices))

    @property
    def product_count(self) -> int:
        """Number of products with a price."""
        return len(self._prices)

    def check_product_code_exists(self, product_code: ProductCode) -> bool:
        """Check whether a product code is in the catalog."""
        return product_code.value in self._prices

    def get_product_price(self, product_code: ProductCode) -> Price:
        """Get the unit price of a product.

        Raises:
            KeyError: If the product is not in the catalog.
        """
        try:
            return self._prices[product_code.value]
        except KeyError:
            raise KeyError(f"No price for product {product_code.value}") from None


# Global catalog instance
_product_catalog: ProductCatalog | None = None


def get_product_catalog() -> ProductCatalog:
    """Get the catalog loaded from ``settings.product_prices``."""
    global _product_catalog
    if _product_catalog is None:
        _product_catalog = ProductCatalog(settings.product_prices)
    return _product_catalog
