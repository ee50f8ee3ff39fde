"""Display models, formatting helpers, flags and catalogues for a Mollie payments command-line client."""

__version__ = "0.1.0"

__all__ = [
    "browse",
    "captures",
    "catalog",
    "chargebacks",
    "customers",
    "flags",
    "formatting",
    "invoices",
    "issuers",
    "methods",
    "orders",
    "payments",
    "permissions",
    "profiles",
    "refunds",
]