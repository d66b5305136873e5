"""Exchange rate adapters.

Implementations:
- Static table (configured rates, no network)
"""
