"""Command-line flag names and the helpers that attach them to parsers."""

from __future__ import annotations

import argparse
import weakref
from dataclasses import dataclass
from enum import Enum
from typing import Any

AMOUNT_CURRENCY_ARG = "amount-currency"
AMOUNT_VALUE_ARG = "amount-value"
BILLING_COUNTRY_ARG = "billing-country"
CANCELABLE_ARG = "cancelable"
CURRENCY_ARG = "currency"
CUSTOMER_ID_ARG = "customer"
DESCRIPTION_ARG = "description"
EMBED_ARG = "embed"
EMAIL_ARG = "email"
FIELDS_ARG = "fields"
FROM_ARG = "from"
ID_ARG = "id"
INCLUDE_ARG = "include"
INVOICE_ARG = "invoice"
LIMIT_ARG = "limit"
LOCALE_ARG = "locale"
MANDATE_ID_ARG = "mandate"
METADATA_ARG = "metadata"
METHOD_ARG = "method"
NAME_ARG = "name"
PAYMENT_ARG = "payment"
PERMISSION_ARG = "permission"
REFERENCE_ARG = "reference"
REDIRECT_URL_ARG = "redirect-to"
RPM_TO_COUNTRY_ARG = "restrict-payment-to-country"
RESOURCE_ARG = "resource"
SEQUENCE_TYPE_ARG = "sequence-type"
WALLETS_ARG = "wallets"
WEBHOOK_URL_ARG = "webhook-url"
YEAR_ARG = "year"
PROMPT_ARG = "prompt"

DEFAULT_LIMIT = 250


class FlagKind(Enum):
    """The value type a flag takes."""

    STRING = "string"
    INT = "int"
    BOOL = "bool"


@dataclass(frozen=True)
class FlagSpec:
    """Everything needed to attach one flag to a parser."""

    name: str
    usage: str = ""
    kind: FlagKind = FlagKind.STRING
    required: bool = False
    default: Any = None
    shorthand: str = ""
    persistent: bool = False

    @property
    def dest(self) -> str:
        """The attribute name the parsed value is stored under."""
        return self.name.replace("-", "_")

    def resolved_default(self) -> Any:
        """The default value, falling back to the zero value of the kind."""
        if self.kind is FlagKind.BOOL:
            return bool(self.default) if self.default is not None else False
        if self.kind is FlagKind.INT:
            return int(self.default) if self.default is not None else 0
        return "" if self.default is None else str(self.default)


_PERSISTENT: "weakref.WeakKeyDictionary[argparse.ArgumentParser, list[FlagSpec]]" = (
    weakref.WeakKeyDictionary()
)


def add_flag(parser: argparse.ArgumentParser, spec: FlagSpec) -> argparse.Action:
    """Attach the flag described by ``spec`` to ``parser`` and return its action."""
    options = [f"--{spec.name}"]
    if spec.shorthand:
        options.insert(0, f"-{spec.shorthand}")

    kwargs: dict[str, Any] = {
        "dest": spec.dest,
        "help": spec.usage,
        "default": spec.resolved_default(),
    }
    if spec.kind is FlagKind.BOOL:
        kwargs["action"] = argparse.BooleanOptionalAction
    elif spec.kind is FlagKind.INT:
        kwargs["type"] = int
    if spec.required:
        kwargs["required"] = True

    action = parser.add_argument(*options, **kwargs)
    if spec.persistent:
        _PERSISTENT.setdefault(parser, []).append(spec)
    return action


def persistent_flags(parser: argparse.ArgumentParser) -> tuple[FlagSpec, ...]:
    """Flags on ``parser`` that its sub-commands should inherit."""
    return tuple(_PERSISTENT.get(parser, ()))


def add_resource_flag(parser: argparse.ArgumentParser) -> argparse.Action:
    """Attach --resource."""
    return add_flag(parser, FlagSpec(
        name=RESOURCE_ARG,
        usage="filter for methods that can be used in combination with the provided resource (orders/payments)",
    ))


def add_locale_flag(parser: argparse.ArgumentParser) -> argparse.Action:
    """Attach --locale."""
    return add_flag(parser, FlagSpec(
        name=LOCALE_ARG,
        usage="get the payment method name in the corresponding language",
    ))


def add_sequence_type_flag(parser: argparse.ArgumentParser) -> argparse.Action:
    """Attach --sequence-type."""
    return add_flag(parser, FlagSpec(
        name=SEQUENCE_TYPE_ARG,
        usage="filter methods by sequence type (oneoff, first, recurring)",
    ))


def add_currency_flags(parser: argparse.ArgumentParser) -> tuple[argparse.Action, argparse.Action]:
    """Attach --amount-currency and --amount-value, which together form an amount."""
    currency = add_flag(parser, FlagSpec(
        name=AMOUNT_CURRENCY_ARG,
        usage="the amount and currency (linked to amount-value)",
    ))
    value = add_flag(parser, FlagSpec(
        name=AMOUNT_VALUE_ARG,
        usage="the amount and currency (linked to amount-currency)",
    ))
    return currency, value


def add_currency_code_flag(parser: argparse.ArgumentParser) -> argparse.Action:
    """Attach --currency."""
    return add_flag(parser, FlagSpec(
        name=CURRENCY_ARG,
        usage="the currency to receiving the minimumAmount and maximumAmount in",
    ))


def add_billing_country_flag(parser: argparse.ArgumentParser) -> argparse.Action:
    """Attach --billing-country."""
    return add_flag(parser, FlagSpec(
        name=BILLING_COUNTRY_ARG,
        usage="filter for methods supporting the ISO-3166 alpha-2 customer billing country",
    ))


def add_wallet_flag(parser: argparse.ArgumentParser) -> argparse.Action:
    """Attach --wallets."""
    return add_flag(parser, FlagSpec(
        name=WALLETS_ARG,
        usage="a comma-separated list of the wallets you support in your checkout (applepay)",
    ))


def add_id_flag(parser: argparse.ArgumentParser, required: bool) -> argparse.Action:
    """Attach --id, required or not."""
    return add_flag(parser, FlagSpec(
        name=ID_ARG,
        usage="the payment method id",
        required=required,
    ))


def add_from_flag(parser: argparse.ArgumentParser) -> argparse.Action:
    """Attach --from."""
    return add_flag(parser, FlagSpec(
        name=FROM_ARG,
        usage="offset the result to the resource with the given id",
    ))


def add_limit_flag(parser: argparse.ArgumentParser) -> argparse.Action:
    """Attach the integer --limit flag."""
    return add_flag(parser, FlagSpec(
        name=LIMIT_ARG,
        usage="limits the number of rows to retrieve",
        kind=FlagKind.INT,
        default=DEFAULT_LIMIT,
    ))


def add_embed_flag(parser: argparse.ArgumentParser) -> argparse.Action:
    """Attach --embed."""
    return add_flag(parser, FlagSpec(
        name=EMBED_ARG,
        usage="embedding additional information (when supported)",
    ))


def add_payment_flag(parser: argparse.ArgumentParser) -> argparse.Action:
    """Attach --payment."""
    return add_flag(parser, FlagSpec(
        name=PAYMENT_ARG,
        usage="only Refunds for the specific Payment are returned",
    ))


def add_include_flag(parser: argparse.ArgumentParser, persistent: bool) -> argparse.Action:
    """Attach --include / -i, optionally inherited by sub-commands."""
    return add_flag(parser, FlagSpec(
        name=INCLUDE_ARG,
        shorthand="i",
        usage="this resource allows to enrich the response by including other objects",
        persistent=persistent,
    ))


def add_prompter_flag(parser: argparse.ArgumentParser, persistent: bool) -> argparse.Action:
    """Attach the boolean --prompt / -p, optionally inherited by sub-commands."""
    return add_flag(parser, FlagSpec(
        name=PROMPT_ARG,
        shorthand="p",
        kind=FlagKind.BOOL,
        usage="prompts for values instead of parsing them from flags (not required only)",
        persistent=persistent,
        default=False,
    ))