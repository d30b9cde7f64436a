from os import getenv
from pathlib import Path

# root of the apt configuration tree, usually /etc/apt
APT_CONFIG_DIR = Path(getenv("APTCLIENT_CONFIG_DIR", "/etc/apt"))

SOURCES_LIST = "sources.list"
SOURCES_LIST_DIR = "sources.list.d"
LIST_SUFFIX = ".list"
DEB822_SUFFIX = ".sources"

# the one drop-in file we own and append to
MANAGED_LIST_NAME = getenv("APTCLIENT_MANAGED_LIST", "managed.list")

# external tools
APT_GET = getenv("APTCLIENT_APT_GET", "apt-get")
APT = getenv("APTCLIENT_APT", "apt")
APT_CACHE = getenv("APTCLIENT_APT_CACHE", "apt-cache")
DPKG_QUERY = getenv("APTCLIENT_DPKG_QUERY", "dpkg-query")

# six tab-separated fields, see parsers.parse_dpkg_query_output
DPKG_QUERY_FORMAT = (
    "${Package}\t${Architecture}\t${db:Status-Status}\t${Version}\t${Installed-Size}\t${Binary:summary}\n"
)
NO_PACKAGES_FOUND = "no packages found matching"
