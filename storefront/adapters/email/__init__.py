"""Email adapters for reaching customers.

Implementations:
- Stdout (terminal pretty-print)
"""
