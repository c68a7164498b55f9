"""Application layer module.

Contains the place-order workflow and its stages.
"""

from order_taking.application.place_order import (
    PlaceOrderWorkflow,
    get_place_order_workflow,
)

__all__ = [
    "PlaceOrderWorkflow",
    "get_place_order_workflow",
]
