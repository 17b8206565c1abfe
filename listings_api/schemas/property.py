from pydantic import BaseModel, ConfigDict
from typing import Any, Optional

class PropertyCreate(BaseModel):
    # Required fields are checked for truthiness by the service, not here
    model_config = ConfigDict(extra="allow")

    name: Optional[Any] = None
    price: Optional[Any] = None
    location: Optional[Any] = None
    image: Optional[Any] = None

class PropertyResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str

class MessageResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str
