"""
Application common module.

Contains base classes for the application layer:
- Command / CommandHandler: write operations
- Query / QueryHandler: read operations
- Result: re-exported from the domain, the outcome type of every use case
"""

from commerce_api.domain.common.result import Failure, Result, Success

from .command import Command, CommandHandler
from .query import Query, QueryHandler

__all__ = [
    "Command",
    "CommandHandler",
    "Failure",
    "Query",
    "QueryHandler",
    "Result",
    "Success",
]
