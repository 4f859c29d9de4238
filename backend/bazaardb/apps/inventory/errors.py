"""
Rejections raised by the movement workflow.

Each carries the HTTP status and the message the caller sees. Everything
except `InvalidRequest` is raised inside an atomic unit and therefore
implies a rollback.
"""

from __future__ import annotations

from typing import Optional


class MovementRejected(Exception):
    status_code = 400
    message = "Transaction rejected."

    def __init__(self, message: Optional[str] = None):
        if message:
            self.message = message
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidRequest(MovementRejected):
    message = "Empty Data"


class OverstockRejected(MovementRejected):
    message = "Overstocking would occur. Transaction aborted."


class StockoutRejected(MovementRejected):
    message = "Stock is below minimum quantity. Please reorder."


class InventoryNotFound(MovementRejected):
    status_code = 404
    message = "Inventory item not found."


class InsufficientQuantity(MovementRejected):
    message = "Not enough quantity in inventory to remove."


class UnsupportedMovementType(MovementRejected):
    message = "Invalid movement_type"


class TransactionFailed(MovementRejected):
    # Storage faults surface with a fixed message; the cause is only logged.
    status_code = 500
    message = "Transaction failed."
