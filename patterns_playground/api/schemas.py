"""
Pydantic schemas for API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from patterns_playground.domain import utc_now


class ProcessPaymentRequest(BaseModel):
    """
    Request to process a payment through a provider chosen by key.

    Fields carry no range or length rules: the resolved provider decides
    whether an amount or currency is acceptable (400), and an empty or
    unknown key is a missing provider (404).
    """

    amount: Decimal = Field(default=Decimal("0"), description="Payment amount")
    currency: str = Field(default="", description="Currency code (e.g., USD, BTC)")
    provider_key: str = Field(default="", alias="providerKey", description="Payment provider key (e.g., stripe)")
    customer_email: str = Field(default="", alias="customerEmail", description="Customer email address")

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Currency codes are matched upper-case."""
        return v.upper()

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "amount": "100.00",
                    "currency": "USD",
                    "providerKey": "stripe",
                    "customerEmail": "customer@example.com",
                }
            ]
        },
    }


class ErrorResponse(BaseModel):
    """Error body returned for 4xx provider errors."""

    error: str = Field(..., description="Error message")
    provider_key: Optional[str] = Field(default=None, alias="providerKey", description="Requested provider key")
    timestamp: datetime = Field(default_factory=utc_now, description="When the error was produced (UTC)")

    model_config = {"populate_by_name": True}


class PatternRoutes(BaseModel):
    """Routes exposed for one pattern."""

    name: str = Field(..., description="Pattern route name")
    demo: str = Field(..., description="Demo endpoint path")
    test: str = Field(..., description="Self-test endpoint path")


class PatternListResponse(BaseModel):
    """Available patterns."""

    count: int = Field(..., description="Number of patterns")
    patterns: List[PatternRoutes] = Field(..., description="Patterns and their endpoints")


class HealthCheckResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Overall health status (healthy/unhealthy)")
    checks: Optional[Dict[str, Any]] = Field(default=None, description="Individual service checks")
    message: Optional[str] = Field(default=None, description="Status message")
