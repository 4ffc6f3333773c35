"""
Host access - the page a session reads fields from and writes values to.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..errors import HostMutationFailure
from ..models.document import DocumentNode
from ..models.field import Field


class FormHost(ABC):
    """Read-only field enumeration plus the mutation primitives."""

    @abstractmethod
    async def snapshot(self) -> DocumentNode:
        """Return the current document tree."""

    @abstractmethod
    async def set_value(self, field: Field, value: str):
        """Set a field's value. Raises HostMutationFailure on refusal."""

    @abstractmethod
    async def dispatch_change(self, field: Field):
        """Notify host-side listeners that a field's value changed."""

    async def highlight(self, field: Field):
        """Focus and visually mark the field being asked for."""

    async def clear_highlight(self, field: Field):
        """Remove the mark set by highlight()."""

    async def show_status(self, message: str):
        """Show a status line to the user."""

    async def submit(self, field: Field) -> bool:
        """Submit the form owning a field. Returns False when there is none."""
        return False


class DocumentHost(FormHost):
    """Host backed by an in-memory DocumentNode tree."""

    HIGHLIGHT_STYLE = {
        'outline': '3px solid #007bff',
        'box-shadow': '0 0 10px rgba(0, 123, 255, 0.5)',
    }

    def __init__(self, root: DocumentNode):
        self.root = root
        self.statuses: List[str] = []
        self.focused: Optional[DocumentNode] = None
        self.submitted: List[DocumentNode] = []

    async def snapshot(self) -> DocumentNode:
        return self.root

    async def set_value(self, field: Field, value: str):
        node = self._node(field)
        if 'readonly' in node.attributes:
            raise HostMutationFailure(f"Field is read-only: {field!r}")
        node.value = value
        field.value = value

    async def dispatch_change(self, field: Field):
        node = self._node(field)
        if not field.is_enumeration():
            node.events.append('input')
        node.events.append('change')

    async def highlight(self, field: Field):
        node = self._node(field)
        node.style.update(self.HIGHLIGHT_STYLE)
        self.focused = node

    async def clear_highlight(self, field: Field):
        node = self._node(field)
        for key in self.HIGHLIGHT_STYLE:
            node.style.pop(key, None)

    async def show_status(self, message: str):
        self.statuses.append(message)

    async def submit(self, field: Field) -> bool:
        form = self._node(field).closest('form')
        if form is None:
            return False
        form.events.append('submit')
        self.submitted.append(form)
        return True

    @staticmethod
    def _node(field: Field) -> DocumentNode:
        if field.node is None:
            raise HostMutationFailure(f"Field is not attached to a document: {field!r}")
        return field.node
