"""Response envelopes shared by several routers."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    message: str = Field(..., example="Parking deleted successfully")
