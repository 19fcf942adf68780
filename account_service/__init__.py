"""
Account Address Book Service.

Marketplace accounts and their address books, kept at exactly one default
address whenever a book is non-empty.
"""

__version__ = "0.1.0"
__description__ = "Account Address Book Service"
