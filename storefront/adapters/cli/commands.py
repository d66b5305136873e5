"""CLI command implementations for the Storefront.

Provides checkout operations through a command-line interface.

This adapter maps CLI commands (price, shipping, order, signup, ...) to
CheckoutService operations and store policies. It handles CLI-specific
argument coercion and error reporting; every command returns a
JSON-serializable dictionary.
"""

import logging
from typing import Any

from storefront.core.checkout_service import CheckoutService
from storefront.core.models import CreditCard, Order, UserInput
from storefront.core.policies import HolidayDiscountPolicy, OpeningHoursPolicy
from storefront.core.validation import validate_user

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to the checkout service."""

    def __init__(
        self,
        checkout: CheckoutService,
        opening_hours: OpeningHoursPolicy,
        holiday: HolidayDiscountPolicy,
    ):
        """Initialize the CLI command handler.

        Args:
            checkout: CheckoutService executing customer operations.
            opening_hours: Policy answering whether the store is online.
            holiday: Policy giving today's holiday discount.
        """
        self.checkout = checkout
        self.opening_hours = opening_hours
        self.holiday = holiday

    async def convert_price(self, price: float, currency: str) -> dict[str, Any]:
        """Convert a base-currency price via CLI.

        Returns:
            Dictionary with the converted price, or status/message on error.
        """
        currency = str(currency)
        try:
            converted = self.checkout.get_price_in_currency(float(price), currency)
        except (TypeError, ValueError, OverflowError) as e:
            logger.error(f"Failed to convert price: {e}")
            return {
                "status": "error",
                "operation": "price",
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "price",
            "currency": currency,
            "price": round(converted, 2),
        }

    async def shipping_info(self, destination: str) -> dict[str, Any]:
        """Describe shipping to a destination via CLI."""
        destination = str(destination)
        return {
            "status": "success",
            "operation": "shipping",
            "destination": destination,
            "message": self.checkout.get_shipping_info(destination),
        }

    async def render_page(self) -> dict[str, Any]:
        """Render the home page via CLI."""
        content = await self.checkout.render_page()
        return {
            "status": "success",
            "operation": "render",
            "content": content,
        }

    async def submit_order(
        self, total_amount: float, credit_card_number: str
    ) -> dict[str, Any]:
        """Submit an order via CLI.

        A declined payment is reported with status "error" and the
        order result attached.
        """
        try:
            order = Order(total_amount=float(total_amount))
        except (TypeError, ValueError, OverflowError) as e:
            logger.error(f"Invalid order amount: {e}")
            return {
                "status": "error",
                "operation": "order",
                "message": f"Invalid total_amount: {total_amount}",
            }

        result = await self.checkout.submit_order(
            order, CreditCard(credit_card_number=str(credit_card_number))
        )
        return {
            "status": "success" if result.success else "error",
            "operation": "order",
            "result": result.to_dict(),
        }

    async def sign_up(self, email: str) -> dict[str, Any]:
        """Sign up an email address via CLI."""
        registered = await self.checkout.sign_up(email)
        if not registered:
            return {
                "status": "error",
                "operation": "signup",
                "email": email,
                "message": f"Invalid email address: {email}",
            }
        return {
            "status": "success",
            "operation": "signup",
            "email": email,
            "message": f"Welcome email sent to {email}",
        }

    async def login(self, email: str) -> dict[str, Any]:
        """Send a one-time login code via CLI."""
        await self.checkout.login(email)
        return {
            "status": "success",
            "operation": "login",
            "email": email,
            "message": f"Login code sent to {email}",
        }

    async def validate_user(self, username: Any, age: Any) -> dict[str, Any]:
        """Validate sign-up form fields via CLI."""
        message = validate_user(UserInput(username=username, age=age))
        return {
            "status": "error" if "Invalid" in message else "success",
            "operation": "validate",
            "message": message,
        }

    async def store_status(self) -> dict[str, Any]:
        """Report opening state and today's holiday discount."""
        return {
            "status": "success",
            "operation": "status",
            "online": self.opening_hours.is_online(),
            "discount": self.holiday.get_discount(),
        }


async def run_command(
    handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        handler: CLICommandHandler instance.
        command: Command name ('price', 'shipping', 'render', 'order',
            'signup', 'login', 'validate', 'status').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If the command is not recognized or a required
            argument is missing.
    """
    required = {
        "price": ("price", "currency"),
        "shipping": ("destination",),
        "order": ("total_amount", "credit_card_number"),
        "signup": ("email",),
        "login": ("email",),
        "validate": ("username", "age"),
    }
    for name in required.get(command, ()):
        if name not in args:
            raise ValueError(f"Missing required parameter: {name}")

    if command == "price":
        return await handler.convert_price(args["price"], args["currency"])

    elif command == "shipping":
        return await handler.shipping_info(args["destination"])

    elif command == "render":
        return await handler.render_page()

    elif command == "order":
        return await handler.submit_order(
            args["total_amount"], args["credit_card_number"]
        )

    elif command == "signup":
        return await handler.sign_up(args["email"])

    elif command == "login":
        return await handler.login(args["email"])

    elif command == "validate":
        return await handler.validate_user(args["username"], args["age"])

    elif command == "status":
        return await handler.store_status()

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")
