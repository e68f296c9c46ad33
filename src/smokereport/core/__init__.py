"""Core models and exceptions for smoke-report."""
