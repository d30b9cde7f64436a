"""Expose record models."""

from .package import Package
from .repository import Repository, RepositoryList

__all__ = [
    "Package",
    "Repository",
    "RepositoryList",
]
