"""
Document model - Host tree snapshot.
Represents the rendered element tree a session enumerates fields from.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Dict, Iterator, List, Optional

from .field import FieldOption


TEXT_TAG = "#text"


@dataclass(eq=False)
class DocumentNode:
    """One element of a host document tree."""

    tag_name: str
    attributes: Dict[str, str] = dataclass_field(default_factory=dict)
    text: str = ""                      # Leading own text, or the text of a #text node
    children: List['DocumentNode'] = dataclass_field(default_factory=list)
    parent: Optional['DocumentNode'] = dataclass_field(default=None, repr=False)

    # Rendered state
    width: float = 0.0
    height: float = 0.0
    display: str = "block"
    visibility: str = "visible"
    disabled: bool = False

    # Form state
    value: str = ""
    options: Optional[List[FieldOption]] = None

    # Host reference
    selector: str = ""

    # Host-side observables (set by DocumentHost)
    style: Dict[str, str] = dataclass_field(default_factory=dict)
    events: List[str] = dataclass_field(default_factory=list)

    def __post_init__(self):
        self.tag_name = self.tag_name.lower()
        for child in self.children:
            child.parent = self

    @property
    def id(self) -> Optional[str]:
        return self.attributes.get('id') or None

    @property
    def input_type(self) -> str:
        """Host control type, mirroring the DOM `type` property."""
        if self.tag_name == 'select':
            return 'select-multiple' if 'multiple' in self.attributes else 'select-one'
        if self.tag_name == 'textarea':
            return 'textarea'
        if self.tag_name == 'input':
            return (self.attributes.get('type') or 'text').lower()
        return (self.attributes.get('type') or '').lower()

    def append(self, child: 'DocumentNode') -> 'DocumentNode':
        """Attach a child node and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def iter(self) -> Iterator['DocumentNode']:
        """Depth-first traversal in document order, self included."""
        yield self
        for child in self.children:
            yield from child.iter()

    def is_text(self) -> bool:
        return self.tag_name == TEXT_TAG

    def text_content(self) -> str:
        """Text of this node and its descendants, in document order."""
        parts = [self.text] if self.text else []
        parts.extend(child.text_content() for child in self.children)
        return " ".join(part for part in parts if part)

    def closest(self, tag_name: str) -> Optional['DocumentNode']:
        """Nearest ancestor (excluding self) with the given tag."""
        current = self.parent
        while current is not None:
            if current.tag_name == tag_name:
                return current
            current = current.parent
        return None

    def previous_element_sibling(self) -> Optional['DocumentNode']:
        if self.parent is None:
            return None
        siblings = self.parent.children
        position = next(i for i, node in enumerate(siblings) if node is self)
        for node in reversed(siblings[:position]):
            if not node.is_text():
                return node
        return None

    def root(self) -> 'DocumentNode':
        current = self
        while current.parent is not None:
            current = current.parent
        return current

    def find_label_for(self, element_id: str) -> Optional['DocumentNode']:
        """Find a `<label for=...>` anywhere in this node's tree."""
        for node in self.root().iter():
            if node.tag_name == 'label' and node.attributes.get('for') == element_id:
                return node
        return None

    def is_rendered(self) -> bool:
        """
        Check computed visibility.

        A node is not rendered when it, or any ancestor, is `display: none`
        or carries the `hidden` attribute, or when it is `visibility: hidden`.
        """
        if self.visibility == 'hidden':
            return False
        current: Optional[DocumentNode] = self
        while current is not None:
            if current.display == 'none' or 'hidden' in current.attributes:
                return False
            current = current.parent
        return True

    def has_layout(self) -> bool:
        """Check if the node has a nonzero rendered size."""
        return self.width > 0 and self.height > 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DocumentNode':
        """
        Build a tree from a snapshot dictionary.

        Expected keys mirror the dataclass fields; `options` is a list of
        `{'value': ..., 'text': ...}` (or `label`) dictionaries. Text runs
        between elements arrive as `#text` children so mixed content keeps
        its order.
        """
        options = data.get('options')
        node = cls(
            tag_name=data.get('tagName') or data.get('tag_name') or 'div',
            attributes={k: str(v) for k, v in (data.get('attributes') or {}).items()},
            text=(data.get('text') or '').strip(),
            width=float(data.get('width') or 0),
            height=float(data.get('height') or 0),
            display=data.get('display') or 'block',
            visibility=data.get('visibility') or 'visible',
            disabled=bool(data.get('disabled', False)),
            value=data.get('value') or '',
            options=[
                FieldOption(
                    value=str(opt.get('value', '')),
                    text=str(opt.get('text', opt.get('label', ''))).strip(),
                )
                for opt in options
            ] if options is not None else None,
            selector=data.get('selector') or '',
        )
        for child in data.get('children') or []:
            node.append(cls.from_dict(child))
        return node
