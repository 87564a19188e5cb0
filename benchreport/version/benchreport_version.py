from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Version:
    """
    Semantic version information for benchreport.

    Major, minor and patch numbers follow semver; the release date is
    carried for ``benchreport version --verbose``.
    """

    major: int
    minor: int
    patch: int
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.1.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return version string with release date."""
        return f"{self} (released {self.date_string()})"

    def semver(self) -> tuple[int, int, int]:
        """Return semantic version as tuple (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    def date_string(self, fmt: str = "%Y-%m-%d") -> str:
        """Return formatted release date."""
        return self.date.strftime(fmt)


BENCHREPORT_VERSION = Version(
    major=0,
    minor=1,
    patch=0,
    date=datetime(2026, 10, 18),
)
