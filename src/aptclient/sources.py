"""Reader and writer for apt sources configuration (sources.list and sources.list.d)."""

import itertools
import logging
import re
from pathlib import Path

from debian import deb822

from aptclient.constants import (
    APT_CONFIG_DIR,
    DEB822_SUFFIX,
    LIST_SUFFIX,
    MANAGED_LIST_NAME,
    SOURCES_LIST,
    SOURCES_LIST_DIR,
)
from aptclient.exceptions import DuplicateRepositoryError, FileAccessError, InvalidRepositoryError
from aptclient.models import Repository, RepositoryList

logger = logging.getLogger(__name__)

CONFIG_LINE_RE = re.compile(r"^(# )?(deb|deb-src)(?: \[(.*)\])? ([^ ]+) ([^ ]+) ([^#\n]+)(?: +# *(.*))?$")

# deb822 fields that have a one-line option equivalent
DEB822_OPTIONS = {
    "architectures": "arch",
    "languages": "lang",
    "targets": "target",
    "pdiffs": "pdiffs",
    "by-hash": "by-hash",
    "allow-insecure": "allow-insecure",
    "allow-weak": "allow-weak",
    "allow-downgrade-to-insecure": "allow-downgrade-to-insecure",
    "trusted": "trusted",
    "signed-by": "signed-by",
    "check-valid-until": "check-valid-until",
}


def parse_line(line: str) -> Repository | None:
    """Parse a single one-line-style sources entry.

    Args:
        line: A line from a sources.list file

    Returns:
        The parsed repository, or None if the line is not a repository entry
    """
    match = CONFIG_LINE_RE.match(line.rstrip("\r\n"))
    if match is None:
        return None
    disabled, repo_type, options, uri, dist, components, comment = match.groups()
    components = components.strip()
    if not components:
        return None
    return Repository(
        enabled=disabled is None,
        source_repo=repo_type == "deb-src",
        options=options or "",
        uri=uri,
        distribution=dist,
        components=components,
        comment=comment or "",
    )


def parse_lines(text: str) -> RepositoryList:
    """Parse every repository entry in a block of one-line-style text."""
    res = RepositoryList()
    for lineno, line in enumerate(text.splitlines(), start=1):
        repo = parse_line(line)
        if repo is None:
            if line.strip():
                logger.debug(f"Skipping line {lineno}: {line!r}")
            continue
        res.append(repo)
    return res


def _deb822_options(stanza: deb822.Deb822) -> str:
    opts = []
    for key, value in stanza.items():
        name = DEB822_OPTIONS.get(key.lower())
        if name is None:
            continue
        if "\n" in value.strip():
            # inline armored key, no one-line form
            logger.debug(f"Dropping multi-line {key} value from option string")
            continue
        opts.append(f"{name}={','.join(value.split())}")
    return " ".join(opts)


def parse_deb822(text: str) -> RepositoryList:
    """Parse deb822-style (.sources) content.

    Each stanza produces one repository per combination of its Types, URIs and Suites.
    Stanzas missing any of those fields are skipped.
    """
    content = "\n".join(line for line in text.splitlines() if not line.lstrip().startswith("#"))
    res = RepositoryList()
    for stanza in deb822.Deb822.iter_paragraphs(content):
        types = stanza.get("Types", "").split()
        uris = stanza.get("URIs", "").split()
        suites = stanza.get("Suites", "").split()
        if not (types and uris and suites):
            logger.debug(f"Skipping incomplete deb822 stanza: {dict(stanza)}")
            continue
        enabled = stanza.get("Enabled", "yes").strip().lower() not in ("no", "false", "0")
        components = " ".join(stanza.get("Components", "").split())
        options = _deb822_options(stanza)
        for repo_type, uri, suite in itertools.product(types, uris, suites):
            if repo_type not in ("deb", "deb-src"):
                continue
            if not components and not suite.endswith("/"):
                # only flat repositories may omit components
                continue
            res.append(
                Repository(
                    enabled=enabled,
                    source_repo=repo_type == "deb-src",
                    options=options,
                    uri=uri,
                    distribution=suite,
                    components=components,
                )
            )
    return res


def parse_file(path: Path | str) -> RepositoryList:
    """Read and parse one sources file.

    Files ending in `.sources` are read as deb822, everything else as one-line style.

    Raises:
        FileAccessError: if the file cannot be read
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileAccessError(f"Reading {path}: {e}", path) from e

    if path.suffix == DEB822_SUFFIX:
        repos = parse_deb822(text)
    else:
        repos = parse_lines(text)
    logger.debug(f"Parsed {len(repos)} repositories from {path}")
    return repos


def parse_folder(folder_path: Path | str = APT_CONFIG_DIR) -> RepositoryList:
    """Scan an apt config folder (usually /etc/apt) for configured repositories.

    Reads `sources.list` followed by every `.list` and `.sources` file in
    `sources.list.d`, in file name order. A missing `sources.list` is treated
    as empty. Any drop-in with a matching suffix must be readable, so a
    directory or a broken symlink named `*.list` is an error.

    Args:
        folder_path: The apt configuration directory

    Returns:
        All repositories in file-then-line order

    Raises:
        FileAccessError: if `sources.list.d` cannot be listed or a file cannot be read
    """
    folder_path = Path(folder_path)
    primary = folder_path / SOURCES_LIST
    sources_dir = folder_path / SOURCES_LIST_DIR

    try:
        dropins = sorted(p for p in sources_dir.iterdir() if p.suffix in (LIST_SUFFIX, DEB822_SUFFIX))
    except OSError as e:
        raise FileAccessError(f"Reading {sources_dir} folder: {e}", sources_dir) from e

    res = RepositoryList()
    if primary.exists():
        res.extend(parse_file(primary))
    else:
        logger.debug(f"{primary} does not exist, treating it as empty")
    for source in dropins:
        res.extend(parse_file(source))
    return res


def add_repository(repo: Repository, folder_path: Path | str = APT_CONFIG_DIR) -> Path:
    """Add a repository to the managed sources file of an apt config folder.

    The check for an existing entry and the append are not atomic. Callers that
    may run concurrently must serialize calls themselves.

    Args:
        repo: The repository to add
        folder_path: The apt configuration directory (usually /etc/apt)

    Returns:
        Path of the managed file the entry was written to

    Raises:
        DuplicateRepositoryError: if an equivalent repository is already configured
        FileAccessError: if the configuration cannot be read or the managed file written
        InvalidRepositoryError: if the repository line would not parse back to the same entry
    """
    line = repo.config_line()
    written = parse_line(line)
    if written is None or not written.equals(repo):
        raise InvalidRepositoryError(f"Cannot write repository as a sources.list line: {line!r}")

    folder_path = Path(folder_path)
    repos = parse_folder(folder_path)
    if repos.contains(repo):
        raise DuplicateRepositoryError(repo)

    managed_path = folder_path / SOURCES_LIST_DIR / MANAGED_LIST_NAME
    try:
        with managed_path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError as e:
        raise FileAccessError(f"Writing repo data to config file {managed_path}: {e}", managed_path) from e

    logger.info(f"Added repository to {managed_path}: {line}")
    return managed_path
