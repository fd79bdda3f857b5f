"""
Shared kernel for all bounded contexts.

Error taxonomy, money arithmetic helpers and the clock.
No framework imports allowed.
"""
