"""Shipping quote adapters."""
