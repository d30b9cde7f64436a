from pydantic import BaseModel, ConfigDict


class Package(BaseModel):
    """Represents a package as reported by dpkg-query or apt."""

    model_config = ConfigDict(frozen=True)

    name: str
    status: str = ""
    architecture: str = ""
    version: str = ""
    short_description: str = ""
    installed_size_kb: int = 0

    def __str__(self):
        if self.version:
            return f"{self.name}={self.version}"
        return self.name
