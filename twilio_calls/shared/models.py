from pydantic import BaseModel, validator
from typing import Optional, List, NamedTuple, Union, Any
from datetime import datetime
from decimal import Decimal
from enum import IntEnum

class ExitCode(IntEnum):
    """Process exit codes"""
    SUCCESS = 0
    FAILURE = -1

class CallRecord(BaseModel):
    """Call record as returned by the Twilio Calls resource"""
    sid: str
    date_created: Optional[datetime] = None
    to: str = ""
    status: str = ""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    price: Optional[Decimal] = None
    price_unit: Optional[str] = None

    class Config:
        frozen = True

    @validator('sid')
    def validate_sid(cls, v):
        """Validate call SID"""
        if not v:
            raise ValueError('Call SID is required')
        return v

    @classmethod
    def from_instance(cls, call: Any) -> "CallRecord":
        """
        Build a record from a twilio ``CallInstance``

        Args:
            call: Call instance returned by the SDK

        Returns:
            CallRecord: Parsed call record
        """
        return cls(
            sid=call.sid,
            date_created=call.date_created,
            to=call.to or "",
            status=getattr(call.status, "value", call.status) or "",
            start_time=call.start_time,
            end_time=call.end_time,
            price=call.price,
            price_unit=call.price_unit
        )

class DisplayRow(NamedTuple):
    """Formatted projection of a call record, one table row"""
    call_id: str
    created_on: str
    recipient: str
    status: str
    started_at: str
    ended_at: str
    price: str
    price_unit: str

class CallsFetched(BaseModel):
    """Successful fetch of the account's calls"""
    records: List[CallRecord] = []

class CallsUnavailable(BaseModel):
    """The calls could not be retrieved because of credentials or environment"""
    reason: str
    status_code: Optional[int] = None

FetchResult = Union[CallsFetched, CallsUnavailable]
