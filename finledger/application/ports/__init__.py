"""Application ports package."""

from .ledger_repository import LedgerRepositoryPort, LedgerWriterPort

__all__ = ["LedgerRepositoryPort", "LedgerWriterPort"]
