from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Union

from ninja import Field, Schema


class RefuelingIn(Schema):
    """Входные данные заправки. Строки допустимы: проверку делает RefuelingForm."""
    liters: Optional[Union[Decimal, str]] = Field(None, description="Liters filled, greater than 0")
    kilometers: Optional[Union[Decimal, str]] = Field(None, description="Kilometers driven since the previous refueling")
    cost: Optional[Union[Decimal, str]] = Field(None, description="Total cost")


class RefuelingOut(Schema):
    id: int
    liters: Decimal
    kilometers: Decimal
    cost: Decimal
    price_per_liter: Optional[Decimal] = None
    consumption: Optional[Decimal] = Field(None, description="Liters per 100 km")
    created_at: datetime
    updated_at: datetime


class ErrorsOut(Schema):
    errors: List[str]


class MessageOut(Schema):
    detail: str
