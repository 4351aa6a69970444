"""Data Transfer Objects for Report Use Cases"""

from datetime import date
from typing import List
from pydantic import BaseModel, Field
from src.domain.money import Money


class DailyRevenueDTO(BaseModel):
    day: date = Field(..., description="Calendar day (UTC)")
    invoice_count: int = Field(..., description="Invoices issued that day")
    revenue: Money = Field(..., description="Sum of invoice totals")


class SalesSummaryDTO(BaseModel):
    """
    Sales summary for a date range

    Returned by GetSalesSummary use case.
    """

    date_from: date = Field(..., description="First day of the range (inclusive)")
    date_to: date = Field(..., description="Last day of the range (inclusive)")
    invoice_count: int = Field(..., description="Number of invoices")
    total_revenue: Money = Field(..., description="Sum of invoice totals")
    subtotal_exempt: Money = Field(..., description="Sum of exempt subtotals")
    subtotal_taxable_net: Money = Field(..., description="Sum of taxable subtotals without ISV")
    tax_amount: Money = Field(..., description="ISV collected")
    average_ticket: Money = Field(..., description="Average invoice total")
    revenue_by_day: List[DailyRevenueDTO] = Field(..., description="Per-day breakdown, oldest first")

    class Config:
        json_schema_extra = {
            "example": {
                "date_from": "2025-08-01",
                "date_to": "2025-08-07",
                "invoice_count": 2,
                "total_revenue": "330.00",
                "subtotal_exempt": "100.00",
                "subtotal_taxable_net": "200.00",
                "tax_amount": "30.00",
                "average_ticket": "165.00",
                "revenue_by_day": [
                    {"day": "2025-08-01", "invoice_count": 2, "revenue": "330.00"}
                ]
            }
        }
