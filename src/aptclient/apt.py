"""Package operations backed by dpkg-query, apt-get, apt and apt-cache."""

import logging
from pathlib import Path

from aptclient.constants import APT, APT_CACHE, APT_GET, DPKG_QUERY, DPKG_QUERY_FORMAT, NO_PACKAGES_FOUND
from aptclient.exceptions import ExternalToolError, FileAccessError
from aptclient.models import Package
from aptclient.parsers import parse_dependencies_output, parse_dpkg_query_output, parse_upgradable_output
from aptclient.runner import run_command
from aptclient.utils import PackageRef, package_name, package_names

logger = logging.getLogger(__name__)


def list_packages() -> list[Package]:
    """Return every package known to dpkg with its status."""
    return search("*")


def search(pattern: str) -> list[Package]:
    """List the packages known to dpkg that match a glob pattern.

    Args:
        pattern: A dpkg-query package pattern, e.g. `libc6*`

    Returns:
        The matching packages in dpkg-query order. Empty if nothing matches.
    """
    result = run_command([DPKG_QUERY, "-W", f"-f={DPKG_QUERY_FORMAT}", pattern], check=False)
    if result.returncode != 0:
        # dpkg-query exits non-zero for an empty match
        if NO_PACKAGES_FOUND in result.output:
            return []
        raise ExternalToolError(
            f"running {DPKG_QUERY}: exit status {result.returncode}",
            result.args,
            returncode=result.returncode,
            output=result.output,
        )
    return parse_dpkg_query_output(result.output)


def check_for_updates() -> str:
    """Run `apt-get update` to refresh the package indexes."""
    return run_command([APT_GET, "update", "-q"]).output


def list_upgradable() -> list[Package]:
    """Return the upgradable packages with the version an upgrade would install."""
    result = run_command([APT, "list", "--upgradable"], combined=False)
    return parse_upgradable_output(result.output)


def _apt_get(op: str, command: str, packs: tuple[PackageRef | None, ...], *flags: str) -> str:
    names = package_names(packs, op)
    args = [APT_GET, command, "-y", *flags, *names]
    return run_command(args).output


def upgrade(*packs: PackageRef) -> str:
    """Upgrade a set of packages."""
    return _apt_get("apt.upgrade", "upgrade", packs)


def upgrade_all() -> str:
    """Upgrade every upgradable package."""
    return _apt_get("apt.upgrade_all", "upgrade", ())


def dist_upgrade() -> str:
    """Upgrade every upgradable package, removing older packages where needed."""
    return _apt_get("apt.dist_upgrade", "dist-upgrade", ())


def remove(*packs: PackageRef) -> str:
    """Remove a set of packages."""
    return _apt_get("apt.remove", "remove", packs)


def install(*packs: PackageRef) -> str:
    """Install a set of packages."""
    return _apt_get("apt.install", "install", packs)


def install_dry(*packs: PackageRef) -> str:
    """Simulate installing a set of packages without changing the system."""
    return _apt_get("apt.install_dry", "install", packs, "--dry-run")


def download(pack: PackageRef, target_path: Path | str) -> str:
    """Download the .deb of a package (and its missing dependencies) into a directory.

    Args:
        pack: The package to download
        target_path: Directory used as the apt archives cache, should be absolute

    Returns:
        The combined output of apt-get
    """
    name = package_name(pack, "apt.download")
    target_path = Path(target_path)
    # apt-get does not always create the partial directory itself
    partial = target_path / "partial"
    try:
        partial.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileAccessError(f"Creating {partial}: {e}", partial) from e

    args = [
        APT_GET, "install", "-y", "--reinstall", "--download-only",
        "-o", "Debug::NoLocking=1",
        "-o", f'Dir::Cache::archives="{target_path}"',
        name,
    ]  # fmt: skip
    return run_command(args).output


def get_dependencies(pack: PackageRef) -> list[str]:
    """Return the recursive dependencies of a package, from the bottom up."""
    name = package_name(pack, "apt.get_dependencies")
    result = run_command([APT_CACHE, "depends", "-i", "--recurse", name], combined=False)
    return parse_dependencies_output(result.output, name)
