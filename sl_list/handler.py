"""Handler for an intrusive singly linked list.

The handler holds only a reference to the head node. Every operation scans
forward from the head and compares nodes by identity (``is``), never by
payload. Structural changes are pure relinking of ``next`` references.

Caller contract (not checked unless ``HandlerConfig.debug`` is on):
- a node passed to ``append`` has ``next is None`` and is not in any chain;
- the chain stays acyclic.
Breaking it can loop forever or lose nodes.

Nothing here raises: failures surface as ``False`` / ``None`` plus a
diagnostic event.
"""
from __future__ import annotations

from typing import Generic, Optional, TypeVar

from sl_list.config import HandlerConfig, make_diagnostics
from sl_list.diagnostics import DiagnosticKind, Diagnostics
from sl_list.node import Node

T = TypeVar("T")


class Handler(Generic[T]):
    """Find, append and remove caller-owned ``Node`` objects.

    Dropping the handler leaves every node and its data untouched.
    """

    def __init__(
        self,
        diagnostics: Diagnostics | None = None,
        *,
        config: HandlerConfig | None = None,
    ) -> None:
        self.config = config or HandlerConfig()
        if diagnostics is None:
            diagnostics = make_diagnostics(self.config)
        self.diagnostics: Diagnostics = diagnostics
        self._head: Optional[Node[T]] = None

    def find(self, target: Optional[Node[T]]) -> Optional[Node[T]]:
        """Return ``target`` if it is in the chain, else ``None``.

        ``find(None)`` is always ``None``; it is not a membership test.
        """

        seek = self._head
        while seek is not None and seek is not target:
            seek = seek.next
        return seek

    def _scan_for_next(self, target: Optional[Node[T]]) -> Optional[Node[T]]:
        """Walk from head to the first node whose ``next`` is ``target``.

        Returns the head itself when ``target`` is the head. With
        ``target=None`` the walk stops at the tail. ``None`` if the list is
        empty or no node links to ``target``.
        """

        seek = self._head

        if seek is None:
            self.diagnostics.warn(
                DiagnosticKind.EMPTY_LIST_QUERY,
                "predecessor lookup on empty list",
                node_id=_node_id(target),
            )
            return None

        if seek is target:
            return seek

        while seek.next is not target:
            seek = seek.next
            if seek is None:
                break

        return seek

    def preceding_of(self, node: Optional[Node[T]]) -> Optional[Node[T]]:
        """Return the node right before ``node``.

        By convention the head is its own predecessor. ``None`` when ``node``
        is not in the chain (``None`` itself never is).
        """

        if node is None and self._head is not None:
            return None
        return self._scan_for_next(node)

    def next(self, node: Optional[Node[T]]) -> Optional[Node[T]]:
        if node is None:
            return None
        return node.next

    def head(self) -> Optional[Node[T]]:
        return self._head

    def tail(self) -> Optional[Node[T]]:
        """Return the last node (the one whose ``next`` is ``None``)."""

        return self._scan_for_next(None)

    def append(self, new_node: Node[T]) -> None:
        """Link ``new_node`` after the current tail.

        O(1) on an empty list, O(n) otherwise. ``new_node.next`` is left as
        is: it must already be ``None``.
        """

        if self.config.debug:
            self._check_append_contract(new_node)

        if self._head is None:
            self._head = new_node
            return

        last = self.tail()
        if last is not None:
            last.next = new_node

    def remove(self, node: Optional[Node[T]]) -> bool:
        """Unlink ``node`` from the chain and clear its ``next``.

        Returns True on success; the node is then detached and may be appended
        again, here or elsewhere. Returns False, leaving the chain unchanged,
        if ``node`` is not in the chain. ``node.data`` is never touched.
        """

        if node is not None and node is self._head:
            self._head = node.next
            _detach(node)
            self.diagnostics.info(DiagnosticKind.REMOVED, "removed head node", node_id=id(node))
            return True

        preceding = self._scan_for_next(node) if node is not None else None

        if preceding is None:
            self.diagnostics.error(
                DiagnosticKind.NOT_FOUND,
                "node not found in linked list",
                node_id=_node_id(node),
            )
            return False

        # [preceding] -> [node] -> [rest]  becomes  [preceding] -> [rest]
        preceding.next = node.next
        _detach(node)

        self.diagnostics.info(DiagnosticKind.REMOVED, "removed node", node_id=id(node))
        return True

    def _check_append_contract(self, new_node: Node[T]) -> None:
        if new_node.next is not None:
            self.diagnostics.warn(
                DiagnosticKind.CONTRACT_VIOLATION,
                "appending a node whose next is already set",
                node_id=id(new_node),
            )
        if self.find(new_node) is not None:
            self.diagnostics.warn(
                DiagnosticKind.CONTRACT_VIOLATION,
                "appending a node that is already in this list",
                node_id=id(new_node),
            )


def _detach(node: Optional[Node]) -> None:
    if node is None:
        return
    node.next = None


def _node_id(node: Optional[Node]) -> Optional[int]:
    return id(node) if node is not None else None
