"""Domain layer - source resource and request parameter types."""

from payment_sources.domain.exceptions import DecodeError, SourceClientError
from payment_sources.domain.models import (
    Address,
    OpenEnum,
    ReceiverFlow,
    RedirectFlow,
    RedirectFlowStatus,
    RefundAttributesMethod,
    RefundAttributesStatus,
    Source,
    SourceFlow,
    SourceOwner,
    SourceStatus,
    SourceUsage,
    VerificationFlow,
    VerificationFlowStatus,
)
from payment_sources.domain.params import (
    AddressParams,
    Params,
    RedirectParams,
    SourceObjectParams,
    SourceOwnerParams,
)


__all__ = [
    "Address",
    "AddressParams",
    "DecodeError",
    "OpenEnum",
    "Params",
    "ReceiverFlow",
    "RedirectFlow",
    "RedirectFlowStatus",
    "RedirectParams",
    "RefundAttributesMethod",
    "RefundAttributesStatus",
    "Source",
    "SourceClientError",
    "SourceFlow",
    "SourceObjectParams",
    "SourceOwner",
    "SourceOwnerParams",
    "SourceStatus",
    "SourceUsage",
    "VerificationFlow",
    "VerificationFlowStatus",
]
