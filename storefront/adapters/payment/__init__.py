"""Payment adapters.

Implementations:
- Sandbox (approves everything except configured test cards)
"""
