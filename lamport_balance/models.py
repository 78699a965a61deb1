"""Models shared by the balance endpoint."""

from pydantic import BaseModel, Field

U64_MAX = 2**64 - 1


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy")
    version: str = Field(default="1.0.0")


class ErrorResponse(BaseModel):
    """Error response envelope."""

    error: str = Field(..., description="High-level error message")


class BalanceRequest(BaseModel):
    """Address to look up, from the query string or a JSON body."""

    address: str = Field(..., description="Base58 encoded account public key.")


class BalanceResponse(BaseModel):
    """Account balance in lamports."""

    lamports: int = Field(..., ge=0, le=U64_MAX, description="Balance in lamports.")
