"""
Order Domain Model

Represents one purchase transaction scored by the discount rules.
This is the single source of truth for the order record structure.

Author: TM3
Date: 2025-11-20
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from datetime import datetime, date
from decimal import Decimal


OUTPUT_HEADER = "Order Date, Product Name, Expiry Date, Quantity, Unit Price, Channel, Payment Method, Discount"
OUTPUT_DELIMITER = ", "


class Order(BaseModel):
    """
    Order domain model - one order line read from the transactions file

    Orders are immutable: the combiner produces an annotated copy through
    with_discount(), the parsed values are never touched.

    Fields:
        order_date: Date and time the order was placed
        product_name: Free-form product name
        expiry_date: Product expiry date
        quantity: Units ordered
        unit_price: Price per unit
        channel: Sales channel (App, Store, ...)
        payment_method: Payment method (Visa, Cash, ...)
        discount: Final discount fraction, assigned by the combiner
    """

    order_date: datetime = Field(..., description="Order placement date-time")
    product_name: str = Field(..., description="Product name")
    expiry_date: date = Field(..., description="Product expiry date")
    quantity: int = Field(..., description="Quantity ordered", ge=0)
    unit_price: Decimal = Field(..., description="Price per unit", ge=0, allow_inf_nan=False)
    channel: str = Field(..., description="Sales channel")
    payment_method: str = Field(..., description="Payment method")
    discount: float = Field(0.0, description="Final discount fraction")

    model_config = ConfigDict(frozen=True)

    @property
    def qualifies_for_discount(self) -> bool:
        """Check if the combiner granted any discount"""
        return self.discount > 0.0

    def with_discount(self, discount: float) -> "Order":
        """Return a copy of this order carrying the given discount"""
        return self.model_copy(update={'discount': discount})

    def to_record(self) -> List[str]:
        """
        Render the output fields as text

        Dates use ISO format, the discount uses Python's default float
        rendering (0.0, 0.03, 0.25).
        """
        return [
            # Always HH:MM:SS, zero seconds included (18:18:00, not 18:18)
            self.order_date.isoformat(),
            self.product_name,
            self.expiry_date.isoformat(),
            str(self.quantity),
            str(self.unit_price),
            self.channel,
            self.payment_method,
            str(self.discount)
        ]

    def to_line(self) -> str:
        """Render the order as one output line"""
        return OUTPUT_DELIMITER.join(self.to_record())
