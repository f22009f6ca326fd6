"""Demo data lifecycle tooling for Lancer.

Seeds a tagged batch of interrelated demo records into the marketplace
database and rolls exactly that batch back later, driven by a ledger file.
It is operational tooling and is not part of the web application.

Usage:
    seed-demo [--dry-run]
    rollback-seed [--dry-run]
    # or
    lancer-demo --help
"""

__version__ = "0.1.0"
