"""
Database models package.
"""

from accounts_service.models.account import Account, AccountType

__all__ = ["Account", "AccountType"]
