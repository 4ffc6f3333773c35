"""
Field Inventory Builder - Extract, normalize, and filter fillable fields.
Produces the ordered list of fields a session walks through.
"""

from typing import List, Optional

from ..config.settings import Settings
from ..models.document import DocumentNode
from ..models.field import Field, FieldKind
from ..utils.logger import logger


class FieldInventoryBuilder:
    """Builds the field inventory from a document tree."""

    @staticmethod
    def build(root: DocumentNode) -> List[Field]:
        """
        Complete inventory pipeline.

        Args:
            root: Root node of the host document tree

        Returns:
            Fillable fields in document order (possibly empty)
        """
        # Extract interactive elements
        nodes = FieldInventoryBuilder._extract_elements(root)
        logger.metric("Elements extracted", len(nodes))

        # Filter elements that cannot take voice input
        visible = FieldInventoryBuilder._filter_elements(nodes)
        logger.metric("Fields after filtering", len(visible))

        # Normalize to Field objects
        fields = [FieldInventoryBuilder._normalize_element(node) for node in visible]

        logger.success(f"Field inventory complete: {len(fields)} fields")
        return fields

    @staticmethod
    def _extract_elements(root: DocumentNode) -> List[DocumentNode]:
        """Collect candidate controls depth-first, skipping ignored subtrees."""
        found = []
        stack = [root]

        while stack:
            node = stack.pop()
            if node.tag_name in Settings.IGNORE_TAGS:
                continue
            if node.tag_name in Settings.CANDIDATE_TAGS:
                found.append(node)
            # Reverse so the leftmost child is visited first
            stack.extend(reversed(node.children))

        logger.debug(f"Found {len(found)} candidate controls")
        return found

    @staticmethod
    def _filter_elements(nodes: List[DocumentNode]) -> List[DocumentNode]:
        """
        Keep only controls a user can fill.

        Removes:
        - Disabled elements
        - Hidden, submit and button controls
        - Elements that are not rendered or have no layout size
        """
        filtered = []

        for node in nodes:
            reason = FieldInventoryBuilder._exclusion_reason(node)
            if reason:
                logger.debug(f"Filtered ({reason}): {node.tag_name}#{node.id or ''}")
                continue
            filtered.append(node)

        return filtered

    @staticmethod
    def _exclusion_reason(node: DocumentNode) -> Optional[str]:
        if node.disabled or 'disabled' in node.attributes:
            return 'disabled'
        if node.input_type in Settings.EXCLUDED_INPUT_TYPES:
            return node.input_type
        if not node.is_rendered():
            return 'invisible'
        if not node.has_layout():
            return 'zero size'
        return None

    @staticmethod
    def _normalize_element(node: DocumentNode) -> Field:
        """Normalize a control node to a Field, reading its label sources."""
        kind = FieldKind.from_control(node.tag_name, node.input_type)

        return Field(
            tag_name=node.tag_name,
            input_type=node.input_type,
            kind=kind,
            name=node.attributes.get('name') or None,
            id=node.id,
            placeholder=node.attributes.get('placeholder') or None,
            label_text=FieldInventoryBuilder._label_for(node),
            enclosing_label_text=FieldInventoryBuilder._enclosing_label(node),
            preceding_text=FieldInventoryBuilder._preceding_text(node),
            value=node.value,
            options=list(node.options or []) if kind == FieldKind.ENUMERATION else None,
            selector=node.selector,
            node=node,
        )

    @staticmethod
    def _label_for(node: DocumentNode) -> Optional[str]:
        if not node.id:
            return None
        label = node.find_label_for(node.id)
        if label is None:
            return None
        return label.text_content().strip() or None

    @staticmethod
    def _enclosing_label(node: DocumentNode) -> Optional[str]:
        label = node.closest('label')
        if label is None:
            return None
        text = label.text_content()
        if node.value:
            text = text.replace(node.value, '', 1)
        return text.strip() or None

    @staticmethod
    def _preceding_text(node: DocumentNode) -> Optional[str]:
        sibling = node.previous_element_sibling()
        if sibling is None:
            return None
        return sibling.text_content().strip() or None
