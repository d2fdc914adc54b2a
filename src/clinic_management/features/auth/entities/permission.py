"""Permission definition entity."""

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

_CODE_PATTERN = re.compile(r"^[a-z][a-z0-9_]*:[a-z][a-z0-9_]*$")


@dataclass(frozen=True)
class PermissionDefinition:
    """A grantable permission in ``resource:action`` format.
    
    Definitions form a tree; children are only meaningful together with
    their parent grant.
    """
    
    code: str
    display_name: str
    description: Optional[str] = None
    children: List["PermissionDefinition"] = field(default_factory=list)
    
    def __post_init__(self):
        if not _CODE_PATTERN.match(self.code):
            raise ValueError(f"Invalid permission code format: {self.code}")
    
    @property
    def resource(self) -> str:
        return self.code.split(":", 1)[0]
    
    @property
    def action(self) -> str:
        return self.code.split(":", 1)[1]
    
    def walk(self) -> Iterator["PermissionDefinition"]:
        """Yield this definition and all descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()
