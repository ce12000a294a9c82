"""Walk through every ApiClient operation against the live API.

Usage: oxr-demo APP_ID
"""
import sys
from collections.abc import Callable

from oxr.config.settings import get_settings
from oxr.domain.exceptions import OXRException
from oxr.domain.models import Rates, TimeSeries
from oxr.infrastructure.client import ApiClient
from oxr.monitoring.logger import setup_logging

EX_USAGE = 64

BANNER = "======================================="

DEMO_DATE = "2014-01-01"
DEMO_END_DATE = "2014-01-07"
DEMO_BASE = "BTC"
DEMO_SYMBOLS = ["EUR", "NZD", "USD", "ARS", "JPY"]
DEMO_SERIES_SYMBOLS = ["AUD", "THB", "SEK"]


def _section(*title: str) -> None:
    print()
    print(BANNER)
    for line in title:
        print(line)
    print(BANNER)


def _print_header(result: Rates | TimeSeries) -> None:
    print("Disclaimer:", result.disclaimer)
    print("License:", result.license)


def _print_rates(rates: Rates, with_header: bool = True) -> None:
    if with_header:
        _print_header(rates)
        print("Timestamp:", rates.timestamp)
        print("Base:", rates.base)
        print()
    for code, rate in rates.rates.items():
        print(f"{rates.base}/{code}", rate)


def _print_series(series: TimeSeries) -> None:
    _print_header(series)
    print("Start:", series.start_date)
    print("End:", series.end_date)
    print("Base:", series.base)
    print("Rates:")
    for day, rates in series.rates.items():
        print(f"  {day}:")
        for code, rate in rates.items():
            print(f"    {code}", rate)


def currencies(client: ApiClient) -> None:
    _section("List all available currencies.")
    for code, name in client.currencies().items():
        print(code, name)


def latest(client: ApiClient) -> None:
    _section("List latest exchange rates.")
    _print_rates(client.latest())


def latest_with_options(client: ApiClient) -> None:
    _section(
        "List latest exchange rates for base",
        f"symbol {DEMO_BASE} and quote symbols {', '.join(DEMO_SYMBOLS)}.",
    )
    _print_rates(client.latest(DEMO_BASE, DEMO_SYMBOLS))


def historical(client: ApiClient) -> None:
    _section("List exchange rates as they were", f"on {DEMO_DATE}.")
    _print_rates(client.historical(DEMO_DATE), with_header=False)


def historical_with_options(client: ApiClient) -> None:
    _section(
        "List exchange rates as they were",
        f"on {DEMO_DATE} for base symbol {DEMO_BASE} and",
        f"quote symbols {', '.join(DEMO_SYMBOLS)}.",
    )
    _print_rates(client.historical(DEMO_DATE, DEMO_BASE, DEMO_SYMBOLS), with_header=False)


def time_series(client: ApiClient) -> None:
    _section("List historical exchange rates in bulk", f"from {DEMO_DATE} to {DEMO_END_DATE}.")
    _print_series(client.time_series(DEMO_DATE, DEMO_END_DATE))


def time_series_with_options(client: ApiClient) -> None:
    _section(
        "List historical exchange rates in bulk",
        f"from {DEMO_DATE} to {DEMO_END_DATE} for base",
        f"symbol {DEMO_BASE} and quote symbols {', '.join(DEMO_SERIES_SYMBOLS)}.",
    )
    _print_series(client.time_series(DEMO_DATE, DEMO_END_DATE, DEMO_BASE, DEMO_SERIES_SYMBOLS))


def convert(client: ApiClient) -> None:
    _section("Convert 10.123456789 BTC to UYU.")
    c = client.convert("10.123456789", "BTC", "UYU")
    print("Disclaimer:", c.disclaimer)
    print("License:", c.license)
    print("Request / Query:", c.request.query)
    print("Request / Amount:", c.request.amount)
    print("Request / From:", c.request.from_currency)
    print("Request / To:", c.request.to_currency)
    print("Meta / Timestamp:", c.meta.timestamp)
    print("Meta / Rate:", c.meta.rate)
    print("Response:", c.response)


DEMOS: list[Callable[[ApiClient], None]] = [
    currencies,
    latest,
    historical,
    latest_with_options,
    historical_with_options,
    time_series,
    time_series_with_options,
    convert,
]


def main(argv: list[str] | None = None, client: ApiClient | None = None) -> int:
    argv = sys.argv if argv is None else argv
    if len(argv) != 2:
        print("Usage:", argv[0] if argv else "oxr-demo", "app_id", file=sys.stderr)
        return EX_USAGE

    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    with client or ApiClient(argv[1], settings.PROTOCOL, settings.API_URL) as api:
        for demo in DEMOS:
            try:
                demo(api)
            except OXRException as e:
                print("ERROR:", e)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
