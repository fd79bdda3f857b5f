"""
Investments bounded context: domain layer.

Investment plans, investments and their ACTIVE -> COMPLETED lifecycle,
wallet debits/credits and the transaction ledger that records them.
"""
