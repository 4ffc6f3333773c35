"""Browser and host access for Voice Form Filler."""

from .host import FormHost, DocumentHost
from .browser_manager import BrowserManager
from .page_loader import PageLoader
from .page_host import PlaywrightHost

__all__ = ['FormHost', 'DocumentHost', 'BrowserManager', 'PageLoader', 'PlaywrightHost']
