"""
Provider payload schemas - Infrastructure layer

Typed views over the JSON returned by each third-party provider. Only the
fields the pipeline reads are declared; everything else is ignored.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IpifyPayload(BaseModel):
    """``GET https://api.ipify.org?format=json``"""

    ip: str = Field(min_length=1, description="Public IP address of the caller")

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)


class IpWhoIsPayload(BaseModel):
    """``GET http://ipwho.is/<ip>``"""

    success: bool = Field(description="False when lookup failed")
    message: Optional[str] = Field(default=None, description="Failure reason")
    latitude: Optional[float] = Field(default=None)
    longitude: Optional[float] = Field(default=None)

    model_config = ConfigDict(extra="ignore")


class FlyoverPassPayload(BaseModel):
    risetime: int = Field(description="Rise time, epoch seconds")
    duration: int = Field(description="Pass length in seconds")

    model_config = ConfigDict(extra="ignore")


class FlyoverPayload(BaseModel):
    """``GET https://iss-flyover.herokuapp.com/json/?lat=..&lon=..``"""

    response: List[FlyoverPassPayload]

    model_config = ConfigDict(extra="ignore")
