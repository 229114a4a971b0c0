from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Annotated, Any, Self

from pydantic import BeforeValidator


class OpenEnum(StrEnum):
    """String enum that accepts tokens it does not know about.

    Unknown values become an ``UNRECOGNIZED`` pseudo-member that keeps the raw
    token, so values added by the API later never break decoding.
    """

    @classmethod
    def _missing_(cls, value: object) -> Self | None:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = "UNRECOGNIZED"
        member._value_ = value
        return member

    @property
    def is_recognized(self) -> bool:
        return self._name_ in type(self).__members__


class SourceStatus(OpenEnum):
    CANCELED = "canceled"
    CHARGEABLE = "chargeable"
    CONSUMED = "consumed"
    FAILED = "failed"
    PENDING = "pending"


class SourceFlow(OpenEnum):
    NONE = "none"
    RECEIVER = "receiver"
    REDIRECT = "redirect"
    VERIFICATION = "verification"


class SourceUsage(OpenEnum):
    REUSABLE = "reusable"
    SINGLE_USE = "single_use"


class RedirectFlowStatus(OpenEnum):
    FAILED = "failed"
    PENDING = "pending"
    SUCCEEDED = "succeeded"


class VerificationFlowStatus(OpenEnum):
    FAILED = "failed"
    PENDING = "pending"
    SUCCEEDED = "succeeded"


class RefundAttributesStatus(OpenEnum):
    AVAILABLE = "available"
    MISSING = "missing"
    REQUESTED = "requested"


class RefundAttributesMethod(OpenEnum):
    EMAIL = "email"
    MANUAL = "manual"


def _none_as_empty(value: Any) -> Any:
    return {} if value is None else value


def _none_as_false(value: Any) -> Any:
    return False if value is None else value


def _none_as_blank(value: Any) -> Any:
    return "" if value is None else value


@dataclass
class Address:
    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


@dataclass
class SourceOwner:
    address: Address | None = None
    email: str | None = None
    name: str | None = None
    phone: str | None = None
    verified_address: Address | None = None
    verified_email: str | None = None
    verified_name: str | None = None
    verified_phone: str | None = None


@dataclass
class RedirectFlow:
    return_url: str | None = None
    status: RedirectFlowStatus | None = None
    url: str | None = None


@dataclass
class ReceiverFlow:
    address: str | None = None
    amount_charged: int | None = None
    amount_received: int | None = None
    amount_returned: int | None = None
    refund_attributes_method: RefundAttributesMethod | None = None
    refund_attributes_status: RefundAttributesStatus | None = None


@dataclass
class VerificationFlow:
    attempts_remaining: int | None = None
    status: VerificationFlowStatus | None = None


@dataclass
class Source:
    """A payment source as returned by the API.

    ``type_data`` holds the object stored under the key named by ``type``
    (for example the ``ach_credit_transfer`` hash of an ``ach_credit_transfer``
    source). It is filled in by the decoder, not by the fixed-schema pass.

    At most one of ``receiver``, ``redirect`` and ``verification`` is expected
    to be set, matching ``flow``. The API does not guarantee it and nothing
    here enforces it.
    """

    id: str | None = None
    amount: int | None = None
    client_secret: str | None = None
    created: int | None = None
    currency: str | None = None
    flow: SourceFlow | None = None
    livemode: Annotated[bool, BeforeValidator(_none_as_false)] = False
    metadata: dict[str, Annotated[str, BeforeValidator(_none_as_blank)]] | None = None
    owner: Annotated[SourceOwner, BeforeValidator(_none_as_empty)] = field(default_factory=SourceOwner)
    receiver: ReceiverFlow | None = None
    redirect: RedirectFlow | None = None
    status: SourceStatus | None = None
    type: str | None = None
    type_data: dict[str, Any] = field(default_factory=dict, init=False, repr=False)
    usage: SourceUsage | None = None
    verification: VerificationFlow | None = None

    @property
    def created_at(self) -> datetime | None:
        if self.created is None:
            return None
        return datetime.fromtimestamp(self.created, tz=UTC)

    @property
    def is_chargeable(self) -> bool:
        return self.status == SourceStatus.CHARGEABLE

    @property
    def flow_details(self) -> ReceiverFlow | RedirectFlow | VerificationFlow | None:
        """Return the sub-structure that matches ``flow``, if the payload carried it."""
        match self.flow:
            case SourceFlow.RECEIVER:
                return self.receiver
            case SourceFlow.REDIRECT:
                return self.redirect
            case SourceFlow.VERIFICATION:
                return self.verification
            case _:
                return None
