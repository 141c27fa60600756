# ABOUTME: Core data structures for discovered favicons.
# ABOUTME: Icon is the interchange format between extractors, normalization, filters and ranking.

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Icon:
    """A favicon found in HTML markup, a web-app manifest or a well-known path.

    Extractors create bare icons (URL plus whatever the source declares).
    Normalization fills in the remaining fields and the identity hash, so
    every icon handed back by a Finder has a non-empty url and mime_type.
    Dimensions of 0 mean "unknown".
    """

    url: str
    mime_type: str = ""
    file_ext: str = ""
    width: int = 0
    height: int = 0
    hash: str = ""

    @property
    def is_square(self) -> bool:
        """Whether both sides are equally long. Unknown sizes (0x0) count as square."""
        return self.width == self.height

    @property
    def has_size(self) -> bool:
        """Whether both dimensions are known."""
        return self.width > 0 and self.height > 0

    def to_dict(self) -> dict[str, Any]:
        """Serializable record with the field names external consumers rely on."""
        return {
            "url": self.url,
            "mimetype": self.mime_type,
            "extension": self.file_ext,
            "width": self.width,
            "height": self.height,
            "hash": self.hash,
        }

    def __str__(self) -> str:
        return (
            f"Icon(url={self.url!r}, mimetype={self.mime_type!r}, "
            f"size={self.width}x{self.height}, hash={self.hash[:12]!r})"
        )


@dataclass
class SourceResult:
    """Outcome of one secondary icon source (manifest, well-known paths).

    A failing source still produces a result: its icons are simply empty and
    the failures are recorded in errors for logging. Nothing is raised.
    """

    icons: list[Icon] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
