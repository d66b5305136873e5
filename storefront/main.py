"""Composition root for the Storefront system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Dependency injection
- Interactive CLI loop
"""

import asyncio
import json
import logging
import sys
from dataclasses import dataclass
from typing import Any

from storefront.adapters.analytics.log_tracker import LogPageViewTracker
from storefront.adapters.cli.commands import CLICommandHandler, run_command
from storefront.adapters.clock.system import SystemClock
from storefront.adapters.currency.static_rates import StaticExchangeRateAdapter
from storefront.adapters.email.stdout import StdoutEmailAdapter
from storefront.adapters.payment.sandbox import SandboxPaymentAdapter
from storefront.adapters.security.random_code import RandomCodeGenerator
from storefront.adapters.shipping.flat_rate import FlatRateShippingAdapter
from storefront.config import Settings, load_settings
from storefront.core.checkout_service import CheckoutService
from storefront.core.policies import HolidayDiscountPolicy, OpeningHoursPolicy


@dataclass
class Application:
    """Wired components, returned by build_application()."""

    checkout: CheckoutService
    opening_hours: OpeningHoursPolicy
    holiday: HolidayDiscountPolicy
    cli_handler: CLICommandHandler


async def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Read `command {json-args}` lines from stdin until 'exit' or EOF.

    Each result is printed as indented JSON.
    """
    logger = logging.getLogger(__name__)
    logger.info("Interactive CLI ready. Type 'help' for commands, 'exit' to quit.")
    loop = asyncio.get_running_loop()

    while True:
        try:
            line = await loop.run_in_executor(None, input, "storefront> ")
        except EOFError:
            logger.info("End of input, leaving CLI")
            return
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue

        command, _, raw_args = line.strip().partition(" ")
        command = command.lower()
        if not command:
            continue
        if command == "exit":
            logger.info("Leaving CLI")
            return
        if command == "help":
            _print_cli_help()
            continue

        args = _parse_args(raw_args)
        if args is None:
            logger.error("Arguments must be a JSON object. Use 'help' for command syntax.")
            continue

        try:
            result = await run_command(cli_handler, command, args)
        except ValueError as e:
            result = {"status": "error", "message": str(e)}
        except Exception as e:
            logger.error(f"Command {command} failed: {e}", exc_info=True)
            result = {"status": "error", "message": str(e)}
        print(json.dumps(result, indent=2, default=str))


def _parse_args(raw_args: str) -> dict[str, Any] | None:
    """Decode the JSON object after a command name; None when malformed."""
    if not raw_args.strip():
        return {}
    try:
        args = json.loads(raw_args)
    except json.JSONDecodeError:
        return None
    return args if isinstance(args, dict) else None


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  price
    Convert a price from the base currency.
    Required: price, currency

    Example: price {"price": 10, "currency": "AUD"}

  shipping
    Show shipping cost and delivery estimate.
    Required: destination

    Example: shipping {"destination": "London"}

  render
    Render the home page (records a page view).

    Example: render

  order
    Charge a card for an order.
    Required: total_amount, credit_card_number

    Example: order {"total_amount": 10, "credit_card_number": "4242424242424242"}

  signup
    Register an email address and send a welcome email.
    Required: email

    Example: signup {"email": "someone@example.com"}

  login
    Email a one-time login code.
    Required: email

    Example: login {"email": "someone@example.com"}

  validate
    Validate sign-up form fields.
    Required: username, age

    Example: validate {"username": "dbobe", "age": 44}

  status
    Show whether the store is online and today's holiday discount.

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_application(settings: Settings) -> Application:
    """Instantiate adapters and core services from settings.

    Args:
        settings: Validated application settings.

    Returns:
        Application holding the wired components.
    """
    logger = logging.getLogger(__name__)
    logger.info("Initializing adapters...")

    clock = SystemClock()
    exchange_rates = StaticExchangeRateAdapter(rates=settings.exchange_rates)
    shipping = FlatRateShippingAdapter(
        destinations=settings.shipping_destinations,
        cost=settings.shipping_cost,
        estimated_days=settings.shipping_estimated_days,
    )
    analytics = LogPageViewTracker()
    payment = SandboxPaymentAdapter(declined_cards=settings.declined_cards)
    email = StdoutEmailAdapter(verbose=settings.debug)
    security = RandomCodeGenerator(digits=settings.security_code_digits)

    logger.info("Initializing core services...")

    checkout = CheckoutService(
        exchange_rates=exchange_rates,
        shipping=shipping,
        analytics=analytics,
        payment=payment,
        email=email,
        security=security,
        base_currency=settings.base_currency,
        home_path=settings.home_path,
    )
    opening_hours = OpeningHoursPolicy(
        clock,
        opening_hour=settings.opening_hour,
        closing_hour=settings.closing_hour,
    )
    holiday = HolidayDiscountPolicy(
        clock,
        month=settings.holiday_month,
        day=settings.holiday_day,
        discount=settings.holiday_discount,
    )

    return Application(
        checkout=checkout,
        opening_hours=opening_hours,
        holiday=holiday,
        cli_handler=CLICommandHandler(checkout, opening_hours, holiday),
    )


async def bootstrap() -> None:
    """Load configuration, wire adapters, and start the interactive CLI.

    Raises:
        ValidationError: On invalid configuration.
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading Storefront...")

    app = build_application(settings)

    await _run_cli_interactive(app.cli_handler)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
