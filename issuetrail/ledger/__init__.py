"""Change Ledger for issuetrail.

Keeps the committed diff sets of each issue in a bounded in-memory buffer.
The ledger plays the persistence collaborator for an updater transaction:
committing an issue drains its transient diff set into history, which
starts the next transaction.

Submodules:
    change_ledger   -- Per-issue ring buffer of FieldDiffs.
"""

from issuetrail.ledger.change_ledger import ChangeLedger

__all__ = ["ChangeLedger"]
