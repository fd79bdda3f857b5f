"""
Infrastructure adapters for the markets bounded context.

Read-only adapters; each opens a short-lived session on the injected
engine per call.
"""
