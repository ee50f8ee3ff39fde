# molliecli

Building blocks for a command-line client of the Mollie payments API:

- **Display models** that turn API resources (payments, refunds, captures,
  chargebacks, customers, invoices, payment methods and their issuers,
  orders, permissions and profiles) into rows of key/value pairs, with a fixed
  column order and a description for every column.
- **Formatting helpers** that render amounts, dates, locales, modes and other
  optional values, with fixed placeholders when a value is missing.
- **Flag definitions** that attach the standard options (`--id`, `--limit`,
  `--locale`, `--embed`, …) to an `argparse` parser.
- **Prompt catalogues** listing the locales, sequence types and issuers a user
  can choose from.
- **A browser helper** that opens a URL in the system's default browser.

The package uses only the standard library and supports Python 3.10 and later.

## Formatting values

`molliecli.formatting` holds the shared value types (`Amount`,
`ApplicationFee`, `URL`, `PaginationLinks`) and the formatting helpers.

```python
from molliecli.formatting import Amount, fallback_safe_amount, fallback_safe_date

fallback_safe_amount(Amount(currency="EUR", value="10.00"))  # "€10.00"
fallback_safe_amount(None)                                   # "--- ---"
fallback_safe_date(None)                                     # "----------"
```

- `fallback_safe_amount` drops the decimal point from the value, reads the
  rest as minor units (text that is not an integer counts as 0) and renders it
  with `display_money(cents, currency)`. `display_money` knows the layout of
  AUD, CAD, CHF, CZK, DKK, EUR, GBP, ISK, JPY, NOK, PLN, SEK and USD; any
  other currency renders as an empty string (with a leading `-` if negative).
- `fallback_safe_date` shows dates as `DD-MM-YYYY`.
- `fallback_safe_locale`, `fallback_safe_mode` and `fallback_safe_sequence`
  return the value as text, or an empty string when unset.
- `fallback_safe_payment_method` returns `none` when no method is set.
- `fallback_safe_app_fee` returns `none` without a fee, otherwise the fee's
  formatted amount.
- `fallback_safe_issuers` returns the number of issuers, or `N/A` when there
  are none.

## Display models

Each resource module has a dataclass for the resource, one for a list of it,
a row builder, and display models:

| module                  | resource / list                                  | row builder             | display models                                                 |
|-------------------------|--------------------------------------------------|-------------------------|----------------------------------------------------------------|
| `molliecli.payments`    | `Payment`, `PaymentList`                         | `build_payment_row`     | `MolliePayment`, `MollieListPayments`                          |
| `molliecli.refunds`     | `Refund`, `RefundList`                           | `build_refund_row`      | `MollieRefund`, `MollieRefundList`                             |
| `molliecli.captures`    | `Capture`, `CapturesList`                        | `build_capture_row`     | `MollieCapture`, `MollieCapturesList`                          |
| `molliecli.chargebacks` | `Chargeback`, `ChargebacksList`                  | `build_chargeback_row`  | `MollieChargeback`, `MollieChargebackList`                     |
| `molliecli.customers`   | `Customer`, `CustomersList`                      | `build_customer_row`    | `MollieCustomer`, `MollieCustomerList`                         |
| `molliecli.invoices`    | `Invoice`, `InvoicesList`                        | `build_invoice_row`     | `MollieInvoice`, `MollieInvoiceList`                           |
| `molliecli.issuers`     | `Image`, `PaymentMethodIssuer`                   | `build_issuer_row`      | `MolliePaymentMethodIssuer`, `MollieListPaymentMethodsIssuers` |
| `molliecli.methods`     | `PaymentMethodDetails`, `PaymentMethodsList`     | `build_method_row`      | `MollieMethod`, `MollieListMethods`                            |
| `molliecli.permissions` | `Permission`, `PermissionsList`                  | `build_permission_row`  | `MolliePermission`, `MolliePermissionList`                     |
| `molliecli.orders`      | `Order`, `OrderList`                             | `build_order_row`       | `MollieOrder`, `MollieOrderList`                               |
| `molliecli.profiles`    | `ProfileReview`, `Profile`, `ProfileList`        | `build_profile_row`     | `MollieProfile`, `MollieProfileList`                           |

Most display models implement the `Displayable` interface from
`molliecli.formatting`:

| method         | returns                                              |
|----------------|------------------------------------------------------|
| `kv()`         | a list of rows, one dict per resource                |
| `cols()`       | the column names in display order                    |
| `col_map()`    | a description for each column                        |
| `no_headers()` | whether headers are suppressed (`False`)             |
| `filterable()` | whether the output may be filtered by field (`True`) |

`MollieOrderList` and `MollieProfileList` are the exception: they offer only
`kv()`.

```python
from molliecli.formatting import Amount
from molliecli.refunds import MollieRefund, Refund

rows = MollieRefund(Refund(id="rf_test", amount=Amount("EUR", "10.00"))).kv()
rows[0]["AMOUNT"]      # "€10.00"
rows[0]["CREATED_AT"]  # "----------"
```

Order rows show their values as they are, without formatting; the invoice
RESOURCE column shows the invoice reference; the issuer IMAGE column shows
the SVG logo and the method LOGO column the 1x logo.

## Command-line flags

`molliecli.flags` defines the flag names as constants (`ID_ARG`,
`LIMIT_ARG`, …), a `FlagSpec` dataclass with `add_flag(parser, spec)`, and a
helper per standard flag:

```python
import argparse

from molliecli.flags import add_from_flag, add_id_flag, add_limit_flag

parser = argparse.ArgumentParser(prog="mollie customers list")
add_id_flag(parser, True)
add_limit_flag(parser)   # --limit, an int defaulting to 250
add_from_flag(parser)
args = parser.parse_args(["--id", "cs_test"])
args.limit  # 250
```

The other helpers are `add_resource_flag`, `add_locale_flag`,
`add_sequence_type_flag`, `add_currency_flags` (`--amount-currency` and
`--amount-value`), `add_currency_code_flag`, `add_billing_country_flag`,
`add_wallet_flag`, `add_embed_flag`, `add_payment_flag`,
`add_include_flag(parser, persistent)` (`-i/--include`) and
`add_prompter_flag(parser, persistent)` (`-p/--prompt`, a boolean). String
flags default to `""`. Flags marked persistent are recorded and can be read
back with `persistent_flags(parser)`.

## Catalogues

`molliecli.catalog` provides the `SequenceType` and `PaymentMethod` enums and
the choices offered when prompting: `mollie_locales()`, `sequence_types()`,
`kbc_issuers()` and the `GIFT_CARD_ISSUERS` tuple. `default_due_date(today)`
returns the day after `today` (or after the current date) as `YYYY-MM-DD`, and
`parse_short_date(value)` parses a strict `YYYY-MM-DD` date, raising
`ValueError` otherwise.

## Opening links

`molliecli.browse.browser_command(target, platform)` returns the command that
opens a URL: `rundll32 url.dll,FileProtocolHandler` on Windows, `open` on
macOS and `xdg-open` elsewhere. `browse(target, platform)` starts that command
without waiting for it and raises `BrowserError` if it cannot be started.

## What this package does not do

There is no `mollie` command and no API client: nothing here sends requests
to the payments API, reads a configuration file, prompts the user
interactively, or prints tables. The package supplies the models, flags,
catalogues and formatting such a client would be built from.