"""External adapters for the Storefront system.

This package provides local implementations of the core port interfaces.
None of them reach the network; they are meant for demos and manual runs.

Adapter Organization:

- clock/: Wall-clock time source
- currency/: Exchange rates from a static table
- shipping/: Flat-rate shipping quotes
- analytics/: Page view tracking through the log
- payment/: Sandbox payment provider
- email/: Email printed to the terminal
- security/: Random one-time codes
- cli/: Command-line interface for checkout operations
"""
