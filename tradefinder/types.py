"""
Shared data structures for the application.
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["TradeReport", "Method"]

Method = Literal["O(n²)", "O(n)"]


class TradeReport(BaseModel):
    """
    One finder run over a price sequence, ready for display.
    """

    model_config = ConfigDict(frozen=True)

    method: Method = Field(..., description="Which finder produced the trade.")
    buy_index: int = Field(..., ge=0, description="Index of the buy price.")
    sell_index: int = Field(..., ge=0, description="Index of the sell price.")
    buy_price: Optional[float] = Field(None, description="Price at the buy index, if any.")
    sell_price: Optional[float] = Field(None, description="Price at the sell index, if any.")
    profit: float = Field(..., description="Sell price minus buy price; 0 for no trade.")
    elapsed_ms: float = Field(..., ge=0, description="Wall-clock time of the finder call.")

    @property
    def is_trade(self) -> bool:
        return self.profit > 0
