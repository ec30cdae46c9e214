"""Focus containment for modal overlays.

Works over a small element-tree model: a ``Document`` tracks the focused
element and ``Element`` nodes carry tag, attributes and children. While a
``FocusTrap`` is active, Tab and Shift+Tab wrap around inside its container,
and focus goes back to the previously focused element when it is released.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from types import TracebackType

NATIVE_INTERACTIVE_TAGS = frozenset({"button", "input", "select", "textarea"})


@dataclass(eq=False)
class Element:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Element] = field(default_factory=list)
    parent: Element | None = field(default=None, repr=False)

    def append(self, child: Element) -> Element:
        if child.parent is not None:
            child.parent.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: Element) -> None:
        self.children.remove(child)
        child.parent = None

    def descendants(self) -> Iterator[Element]:
        """Descendants in document order (depth-first, pre-order)."""
        for child in self.children:
            yield child
            yield from child.descendants()

    def root(self) -> Element:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def tab_index(self) -> int | None:
        raw = self.attributes.get("tabindex")
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            return None

    @property
    def is_focusable(self) -> bool:
        """Whether Tab navigation can land on this element."""
        if "hidden" in self.attributes or self.attributes.get("aria-hidden") == "true":
            return False
        if "disabled" in self.attributes:
            return False
        tab_index = self.tab_index
        if tab_index is not None:
            return tab_index >= 0
        return self.tag in NATIVE_INTERACTIVE_TAGS or "href" in self.attributes


class Document:
    """Owner of an element tree and of the focus."""

    def __init__(self, body: Element | None = None):
        self.body = body or Element("body")
        self.active_element: Element | None = None

    def contains(self, element: Element | None) -> bool:
        return element is not None and element.root() is self.body

    def focus(self, element: Element) -> bool:
        """Move focus to ``element`` if it is attached to this document."""
        if not self.contains(element):
            return False
        self.active_element = element
        return True

    def blur(self) -> None:
        self.active_element = None


class FocusTrap:
    """Keeps Tab/Shift+Tab cycling inside ``container`` while active."""

    def __init__(self, container: Element, document: Document):
        self.container = container
        self.document = document
        self._previous: Element | None = None
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def focusable_elements(self) -> list[Element]:
        return [el for el in self.container.descendants() if el.is_focusable]

    def activate(self) -> None:
        if self._active:
            return
        self._previous = self.document.active_element
        self._active = True

    def handle_key(self, key: str, shift: bool = False) -> bool:
        """Handle a keydown inside the container.

        Returns True when default focus movement was prevented because focus
        wrapped around.
        """
        if not self._active or key != "Tab":
            return False

        focusable = self.focusable_elements()
        if not focusable:
            return False

        first, last = focusable[0], focusable[-1]
        current = self.document.active_element
        if shift and current is first:
            self.document.focus(last)
            return True
        if not shift and current is last:
            self.document.focus(first)
            return True
        return False

    def deactivate(self) -> None:
        """Release the trap and restore focus if the old element is still attached."""
        if not self._active:
            return
        self._active = False
        previous, self._previous = self._previous, None
        if previous is not None and self.document.contains(previous):
            self.document.focus(previous)

    def __enter__(self) -> FocusTrap:
        self.activate()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.deactivate()
