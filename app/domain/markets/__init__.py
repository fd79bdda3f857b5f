"""
Markets bounded context: domain layer.

Read-only market views: the two-sided order book of resting orders,
recent trades, trading pairs and per-order fill statistics.
"""
