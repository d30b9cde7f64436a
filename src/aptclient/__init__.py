"""aptclient: a Python interface to the Debian apt/dpkg package tools."""

import logging

from .exceptions import (
    AptError,
    DuplicateRepositoryError,
    ExternalToolError,
    FileAccessError,
    InvalidPackageError,
    InvalidRepositoryError,
)
from .models import Package, Repository, RepositoryList

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AptError",
    "DuplicateRepositoryError",
    "ExternalToolError",
    "FileAccessError",
    "InvalidPackageError",
    "InvalidRepositoryError",
    "Package",
    "Repository",
    "RepositoryList",
]
