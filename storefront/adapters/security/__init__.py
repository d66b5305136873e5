"""Security code adapters."""
