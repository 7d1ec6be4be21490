"""
Asset and scene-object handles.

The binders only need a name from an asset and a primary tag from a scene
object, so any host object with a `name` attribute (assets) or a `tags`
sequence (scene objects) can be resolved. `Asset` and `SceneObject` are
small concrete handles for hosts that have nothing better to pass.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class NamedAsset(Protocol):
    """Anything in a sound or image pool."""
    name: str


@runtime_checkable
class TaggedObject(Protocol):
    """Anything in the scene-object candidate list."""
    tags: Sequence[str]


@dataclass(eq=False)
class Asset:
    """A loaded sound or image. Compared and hashed by identity."""
    name: str
    payload: Any = None


@dataclass(eq=False)
class SceneObject:
    """A scene object whose first tag is its lookup name."""
    tags: list[str] = field(default_factory=list)
    payload: Any = None

    @property
    def primary_tag(self) -> Optional[str]:
        return self.tags[0] if self.tags else None


@dataclass(frozen=True)
class UnresolvedObject:
    """
    Stand-in for a scene object that could not be found.

    One sentinel per name, so checkpoints that fail to resolve still get
    distinct keys in a checkpoint index.
    """
    name: str

    def __bool__(self) -> bool:
        return False


def primary_tag(obj: Any) -> Optional[str]:
    """Return the first tag of a scene object, or None if it has none."""
    tags = getattr(obj, "tags", None)
    if not tags:
        return None
    return str(tags[0])


def is_resolved(handle: Any) -> bool:
    """True unless the handle is an unresolved-object sentinel."""
    return not isinstance(handle, UnresolvedObject)
