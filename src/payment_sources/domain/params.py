from dataclasses import dataclass, field

from payment_sources.domain.models import SourceFlow, SourceUsage


@dataclass
class AddressParams:
    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


@dataclass
class SourceOwnerParams:
    address: AddressParams | None = None
    email: str | None = None
    name: str | None = None
    phone: str | None = None


@dataclass
class RedirectParams:
    return_url: str | None = None


@dataclass(kw_only=True)
class Params:
    """Parameters shared by every request.

    ``metadata`` and ``expand`` are encoded into the form body next to the
    resource parameters. ``idempotency_key`` travels as a header.
    """

    metadata: dict[str, str] = field(default_factory=dict)
    expand: list[str] = field(default_factory=list)
    idempotency_key: str | None = None


@dataclass(kw_only=True)
class SourceObjectParams(Params):
    amount: int | None = None
    currency: str | None = None
    customer: str | None = None
    flow: SourceFlow | None = None
    owner: SourceOwnerParams | None = None
    redirect: RedirectParams | None = None
    token: str | None = None
    type: str | None = None
    type_data: dict[str, str] = field(default_factory=dict)
    usage: SourceUsage | None = None
