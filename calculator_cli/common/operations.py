"""Pydantic models for a single arithmetic operation request and its result."""
from pydantic import BaseModel, ConfigDict, Field


class OperationRequest(BaseModel):
    """Represents one operation read from the user: two operands and an operator symbol."""

    # A request is built once from user input and never changed afterwards
    model_config = ConfigDict(frozen=True)

    first: float = Field(..., description="First operand")
    operator: str = Field(..., description="Operator symbol exactly as typed by the user")
    second: float = Field(..., description="Second operand")


class OperationResult(BaseModel):
    """Represents the outcome of a successfully computed operation."""

    model_config = ConfigDict(frozen=True)

    request: OperationRequest = Field(..., description="Request the result was computed from")
    result: float = Field(..., description="Numeric result of the operation")
