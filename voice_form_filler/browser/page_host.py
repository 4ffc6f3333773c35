"""
Playwright host - snapshot a live page and drive its fields.
"""

from playwright.async_api import Page, Error as PlaywrightError

from ..config.settings import Settings
from ..errors import HostError, HostMutationFailure
from ..models.document import DocumentNode
from ..models.field import Field
from ..utils.logger import logger
from .host import FormHost


SNAPSHOT_SCRIPT = """
([ignoreTags, candidateTags]) => {
    let counter = 0;

    const walk = (el) => {
        const tag = el.tagName.toLowerCase();
        if (ignoreTags.includes(tag)) return null;

        const rect = el.getBoundingClientRect();
        const styles = window.getComputedStyle(el);

        const attributes = {};
        for (const attr of Array.from(el.attributes)) {
            attributes[attr.name] = attr.value;
        }

        let selector = '';
        if (candidateTags.includes(tag)) {
            const key = String(counter++);
            el.setAttribute('data-voice-field', key);
            selector = `[data-voice-field="${key}"]`;
        }

        const node = {
            tagName: tag,
            attributes: attributes,
            text: '',
            width: rect.width,
            height: rect.height,
            display: styles.display,
            visibility: styles.visibility,
            disabled: !!el.disabled,
            value: typeof el.value === 'string' ? el.value : '',
            options: tag === 'select'
                ? Array.from(el.options).map(o => ({value: o.value, text: o.text.trim()}))
                : null,
            selector: selector,
            children: [],
        };

        // Options are captured above
        if (tag === 'select') return node;

        // Text runs stay in place between elements
        for (const child of Array.from(el.childNodes)) {
            if (child.nodeType === Node.TEXT_NODE) {
                const text = child.textContent.trim();
                if (text) node.children.push({tagName: '#text', text: text});
            } else if (child.nodeType === Node.ELEMENT_NODE) {
                const childNode = walk(child);
                if (childNode) node.children.push(childNode);
            }
        }
        return node;
    };

    return walk(document.body || document.documentElement);
}
"""

SET_VALUE_SCRIPT = """
([selector, value]) => {
    const el = document.querySelector(selector);
    if (!el) return 'missing';
    if (el.readOnly || el.disabled) return 'readonly';
    el.value = value;
    return el.value === value ? 'ok' : 'rejected';
}
"""

DISPATCH_SCRIPT = """
([selector, events]) => {
    const el = document.querySelector(selector);
    if (!el) return false;
    for (const name of events) {
        el.dispatchEvent(new Event(name, { bubbles: true }));
    }
    return true;
}
"""

HIGHLIGHT_SCRIPT = """
([selector, on]) => {
    const el = document.querySelector(selector);
    if (!el) return;
    if (on) {
        el.focus();
        el.scrollIntoView({ behavior: 'smooth', block: 'center' });
        el.style.outline = '3px solid #007bff';
        el.style.boxShadow = '0 0 10px rgba(0, 123, 255, 0.5)';
    } else {
        el.style.outline = '';
        el.style.boxShadow = '';
    }
}
"""

STATUS_SCRIPT = """
(message) => {
    let statusDiv = document.getElementById('voice-filling-status');
    if (!statusDiv) {
        statusDiv = document.createElement('div');
        statusDiv.id = 'voice-filling-status';
        statusDiv.style.cssText = `
            position: fixed; top: 20px; right: 20px; z-index: 10000;
            background: linear-gradient(135deg, #007bff, #0056b3); color: white;
            padding: 15px 20px; border-radius: 12px; max-width: 350px;
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            font-size: 14px; font-weight: 500; text-align: center;
            box-shadow: 0 6px 20px rgba(0,0,0,0.3);
        `;
        document.body.appendChild(statusDiv);
    }
    statusDiv.textContent = message;
}
"""

SUBMIT_SCRIPT = """
(selector) => {
    const el = document.querySelector(selector);
    if (!el || !el.form) return false;
    el.form.submit();
    return true;
}
"""


class PlaywrightHost(FormHost):
    """Host backed by a Playwright page."""

    def __init__(self, page: Page):
        self.page = page

    async def snapshot(self) -> DocumentNode:
        try:
            data = await self.page.evaluate(
                SNAPSHOT_SCRIPT,
                [sorted(Settings.IGNORE_TAGS), list(Settings.CANDIDATE_TAGS)],
            )
        except PlaywrightError as e:
            raise HostError(f"Failed to snapshot page: {e}") from e

        if not data:
            raise HostError("Page has no document body")
        return DocumentNode.from_dict(data)

    async def set_value(self, field: Field, value: str):
        try:
            outcome = await self.page.evaluate(SET_VALUE_SCRIPT, [field.selector, value])
        except PlaywrightError as e:
            raise HostMutationFailure(f"Failed to set {field!r}: {e}") from e

        if outcome != 'ok':
            raise HostMutationFailure(f"Field {field!r} not set ({outcome})")
        field.value = value

    async def dispatch_change(self, field: Field):
        events = ['change'] if field.is_enumeration() else ['input', 'change']
        try:
            await self.page.evaluate(DISPATCH_SCRIPT, [field.selector, events])
        except PlaywrightError as e:
            raise HostMutationFailure(f"Failed to notify change on {field!r}: {e}") from e

    async def highlight(self, field: Field):
        await self._best_effort(HIGHLIGHT_SCRIPT, [field.selector, True])

    async def clear_highlight(self, field: Field):
        await self._best_effort(HIGHLIGHT_SCRIPT, [field.selector, False])

    async def show_status(self, message: str):
        await self._best_effort(STATUS_SCRIPT, message)

    async def submit(self, field: Field) -> bool:
        try:
            return bool(await self.page.evaluate(SUBMIT_SCRIPT, field.selector))
        except PlaywrightError as e:
            logger.error(f"Form submit failed: {e}")
            return False

    async def _best_effort(self, script: str, arg):
        try:
            await self.page.evaluate(script, arg)
        except PlaywrightError as e:
            logger.debug(f"Page update skipped: {e}")
