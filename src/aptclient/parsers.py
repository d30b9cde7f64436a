"""Parsers for the text output of dpkg-query, apt and apt-cache."""

import logging
import re

from aptclient.models import Package
from aptclient.utils import safe_int

logger = logging.getLogger(__name__)

UPGRADABLE_RE = re.compile(r"^([^ ]+) ([^ ]+) ([^ ]+)( \[upgradable from: [^\[\]]*\])?")

N_DPKG_FIELDS = 6


def parse_dpkg_query_output(out: str) -> list[Package]:
    """Parse dpkg-query output produced with DPKG_QUERY_FORMAT.

    Each line holds six tab-separated fields: name, architecture, status,
    version, installed size and short description. A missing or non-numeric
    size becomes 0. Missing trailing fields become empty strings.
    """
    res = []
    for line in out.splitlines():
        if not line.strip():
            continue
        data = line.split("\t", N_DPKG_FIELDS - 1)
        data += [""] * (N_DPKG_FIELDS - len(data))
        res.append(
            Package(
                name=data[0],
                architecture=data[1],
                status=data[2],
                version=data[3],
                installed_size_kb=safe_int(data[4]),
                short_description=data[5],
            )
        )
    return res


def parse_upgradable_output(out: str) -> list[Package]:
    """Parse the output of `apt list --upgradable`.

    Examples:
        >>> parse_upgradable_output("libgweather-common/zesty-updates,zesty-updates 3.24.1-0ubuntu1 all")[0].name
        'libgweather-common'
    """
    res = []
    for line in out.splitlines():
        match = UPGRADABLE_RE.match(line)
        if match is None:
            continue
        # strip the channel: "libgweather-common/zesty-updates,zesty-updates" -> "libgweather-common"
        name = match.group(1).split("/")[0]
        res.append(
            Package(
                name=name,
                status="upgradable",
                version=match.group(2),
                architecture=match.group(3),
            )
        )
    return res


def parse_dependencies_output(out: str, package_name: str) -> list[str]:
    """Flatten `apt-cache depends --recurse` output into a bottom-up list of names.

    Lines are read in reverse so leaf dependencies come first. The last token
    of each line is the dependency name; the first occurrence of a name wins
    and the queried package itself is left out.
    """
    seen: set[str] = set()
    deps = []
    for line in reversed(out.split("\n")):
        tokens = line.split()
        if not tokens:
            continue
        dep = tokens[-1]
        if dep == package_name or dep in seen:
            continue
        seen.add(dep)
        deps.append(dep)
    return deps
