import logging
from collections.abc import Iterable

from aptclient.exceptions import InvalidPackageError
from aptclient.models import Package

logger = logging.getLogger(__name__)

type PackageRef = Package | str


def safe_int(value: str | None, default: int = 0) -> int:
    """Convert a string to an int, returning `default` for empty or non-numeric input."""
    try:
        return int(value) if value not in (None, "") else default
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric value {value!r}")
        return default


def package_name(pack: PackageRef | None, op: str) -> str:
    """Return the name of a package reference, rejecting empty names.

    Args:
        pack: A Package record or a bare package name
        op: Name of the calling operation, used in the error message

    Raises:
        InvalidPackageError: if the package is None or has an empty name
    """
    name = pack.name if isinstance(pack, Package) else pack
    if not name:
        raise InvalidPackageError(f"{op}: Invalid package with empty Name")
    return name


def package_names(packs: Iterable[PackageRef | None], op: str) -> list[str]:
    """Validate every package reference before any of them is used."""
    return [package_name(p, op) for p in packs]
