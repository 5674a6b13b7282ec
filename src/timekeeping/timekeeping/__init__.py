"""Staff timekeeping package.

Organized by feature modules (punches, contracts, accounting, balance,
reports, ...) with a thin Flask API layer over service/repository layers.
The accounting modules are pure functions over punch snapshots.
"""
