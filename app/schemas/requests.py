from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Fields are optional at the schema level: a missing or empty value is a
# ValidationError raised by the use case and rendered as 400.


class AccessCodeIn(BaseModel):
    # JSON numbers such as {"accessCode": 123456} are accepted as "123456"
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    access_code: Optional[str] = Field(None, alias="accessCode")
    username: Optional[str] = None


class VerifyPasswordIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: Optional[str] = None
    password: Optional[str] = None
    device_id: Optional[str] = Field(None, alias="deviceId")


class CheckUsernameIn(BaseModel):
    username: Optional[str] = None


class PostIn(BaseModel):
    title: Optional[str] = Field(None, description="Post title; the slug is derived from it")
    content: Optional[str] = None
    status: Optional[str] = Field(None, description="Defaults to 'draft'")
