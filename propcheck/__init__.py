"""propcheck: a property-based testing runner with shrinking and diagnostic reports."""

from .arbitrary import Arbitrary, Shrinkable, constant, integer, tuple_of
from .output import (
    PropertyFailedError,
    Report,
    RunOutcome,
    assert_property,
    async_assert_property,
    build_custom_assert,
    classify_run,
    custom_assert,
    format_run_details,
    throw_if_failed,
    with_custom_assert,
    with_outcome_handlers,
)
from .property import (
    MAX_ARITY,
    AsyncProperty,
    ExecutionStatus,
    PreconditionFailure,
    Property,
    Verdict,
    async_property_,
    make_async_property,
    make_property,
    pre,
    property_,
)
from .rng import MutableRandom
from .runner import (
    ExecutionTree,
    Parameters,
    RunDetails,
    VerbosityLevel,
    async_check,
    check,
    load_parameters,
    replay_path,
)

__version__ = "0.1.0"

__all__ = [
    "MAX_ARITY",
    "Arbitrary",
    "AsyncProperty",
    "ExecutionStatus",
    "ExecutionTree",
    "MutableRandom",
    "Parameters",
    "PreconditionFailure",
    "Property",
    "PropertyFailedError",
    "Report",
    "RunDetails",
    "RunOutcome",
    "Shrinkable",
    "Verdict",
    "VerbosityLevel",
    "assert_property",
    "async_assert_property",
    "async_check",
    "async_property_",
    "build_custom_assert",
    "check",
    "classify_run",
    "constant",
    "custom_assert",
    "format_run_details",
    "integer",
    "load_parameters",
    "make_async_property",
    "make_property",
    "pre",
    "property_",
    "replay_path",
    "throw_if_failed",
    "tuple_of",
    "with_custom_assert",
    "with_outcome_handlers",
]
