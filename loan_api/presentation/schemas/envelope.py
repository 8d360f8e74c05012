"""Success envelope shared by every API response."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Standard success response format."""

    success: bool = Field(True, description="Always true for successful responses")
    message: str = Field(..., description="Human-readable summary of the result")
    data: Optional[DataT] = Field(None, description="Response payload")
