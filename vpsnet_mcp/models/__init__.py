"""
Typed shapes exchanged inside a single tool call.

`ToolInput` subclasses are the input contracts agents validate against,
`Payment` is the payment sub-object shared by the ordering, renewal and
backup tools, and `UpstreamRequest` is what a tool translates into.
"""

from .inputs import PAYMENT_DESCRIPTION, OrderInput, PageInput, PathSegment, Payment, ToolInput
from .upstream import UpstreamRequest

__all__ = [
    "PAYMENT_DESCRIPTION",
    "OrderInput",
    "PageInput",
    "PathSegment",
    "Payment",
    "ToolInput",
    "UpstreamRequest",
]
