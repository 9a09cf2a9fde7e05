from __future__ import annotations

from typing import Annotated, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
)


# One URL path segment: no separators, query/fragment markers, escapes or control chars.
PATH_SEGMENT_PATTERN = r"^[^/?#%\\\s\x00-\x1f\x7f]+$"


def _not_dot_segment(value: str) -> str:
    if value in (".", ".."):
        raise ValueError("must not be a relative path segment")
    return value


PathSegment = Annotated[
    StrictStr,
    Field(min_length=1, pattern=PATH_SEGMENT_PATTERN),
    AfterValidator(_not_dot_segment),
]


class ToolInput(BaseModel):
    """
    Base class for tool input contracts.

    Field types are strict so that, for example, a numeric plan ID sent as a
    string is rejected instead of coerced. Unknown argument keys are dropped.
    """

    model_config = ConfigDict(extra="ignore")


class OrderInput(ToolInput):
    orderNo: PathSegment = Field(description="Order number, e.g. VP57068")


class PageInput(ToolInput):
    page: Optional[StrictInt] = Field(default=None, description="Page number")


class Payment(BaseModel):
    """
    Payment method plus redirect URLs.

    Extra keys are kept and forwarded untouched.
    """

    model_config = ConfigDict(extra="allow")

    payment: StrictInt = Field(description="Payment method ID. Use 1 for balance payment")
    successUrl: StrictStr = Field(description="Redirect URL on success (use empty string '')")
    cancelUrl: StrictStr = Field(description="Redirect URL on cancel (use empty string '')")


PAYMENT_DESCRIPTION = "Payment object. For balance: { payment: 1, successUrl: '', cancelUrl: '' }"
