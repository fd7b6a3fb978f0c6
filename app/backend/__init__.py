"""
Remote banking backend: record types, interface and HTTP adapter.
"""

from app.backend.client import BackendError, BankingBackend, HttpBankingBackend

__all__ = ["BackendError", "BankingBackend", "HttpBankingBackend"]
