"""Models for sources.list repository entries."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict


class Repository(BaseModel):
    """A single repository line from an apt sources file."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    source_repo: bool = False
    options: str = ""
    uri: str
    distribution: str
    components: str
    comment: str = ""

    @property
    def repo_type(self) -> str:
        return "deb-src" if self.source_repo else "deb"

    @property
    def identity(self) -> tuple[str, str, str, bool, str]:
        """The fields that decide whether two entries describe the same repository."""
        return (self.uri, self.distribution, self.components, self.source_repo, self.options)

    def equals(self, other: "Repository") -> bool:
        """Check whether `other` is the same repository, ignoring `enabled` and `comment`."""
        return self.identity == other.identity

    def config_line(self) -> str:
        """Return the sources.list line for this repository."""
        res = "" if self.enabled else "# "
        res += self.repo_type + " "
        if self.options.strip():
            res += f"[{self.options}] "
        res += f"{self.uri} {self.distribution} {self.components}"
        if self.comment.strip():
            res += f" # {self.comment}"
        return res

    def __str__(self):
        return self.config_line()


class RepositoryList(list[Repository]):
    """An ordered list of repositories gathered from one or more sources files."""

    def __init__(self, repos: Iterable[Repository] = ()):
        super().__init__(repos)

    def contains(self, repo: Repository) -> bool:
        """Check if an equivalent repository definition is already in the list."""
        return any(repo.equals(r) for r in self)

    def __contains__(self, repo: object) -> bool:
        if not isinstance(repo, Repository):
            return False
        return self.contains(repo)

    def enabled(self) -> "RepositoryList":
        """Return only the active entries."""
        return RepositoryList(r for r in self if r.enabled)
