from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class SuccessOut(BaseModel):
    success: Literal[True] = True


class PasswordVerifiedOut(SuccessOut):
    message: str = "Password verified successfully"


class ExistsOut(BaseModel):
    exists: bool


class MessageOut(BaseModel):
    message: str


class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    status: str
    slug: str
    created_at: Optional[datetime] = None
