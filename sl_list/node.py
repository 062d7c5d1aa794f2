from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A caller-owned link in a singly linked list.

    ``data`` and ``next`` are borrowed references: the list reads and rewires
    ``next`` but never touches ``data``.

    ``eq=False`` keeps ``==`` and ``hash`` identity-based, so two nodes holding
    equal payloads are still distinct members of a chain.
    """

    data: Optional[T] = None
    next: Optional["Node[T]"] = None
