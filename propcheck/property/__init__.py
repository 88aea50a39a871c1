"""Properties: predicates bound to arbitraries."""

from .errors import PreconditionFailure
from .models import RETURNED_FALSE_DESCRIPTION, ExecutionStatus, Verdict, pre
from .property import (
    AWAITABLE_OUTPUT_DESCRIPTION,
    MAX_ARITY,
    AsyncProperty,
    Property,
    async_property_,
    make_async_property,
    make_property,
    property_,
)

__all__ = [
    "AWAITABLE_OUTPUT_DESCRIPTION",
    "MAX_ARITY",
    "RETURNED_FALSE_DESCRIPTION",
    "AsyncProperty",
    "ExecutionStatus",
    "PreconditionFailure",
    "Property",
    "Verdict",
    "async_property_",
    "make_async_property",
    "make_property",
    "pre",
    "property_",
]
