"""Client interaction state: search overlay and focus containment."""

from src.portfolio.ui.focus_trap import Document, Element, FocusTrap
from src.portfolio.ui.search_dialog import DialogState, SearchDialog

__all__ = ["DialogState", "Document", "Element", "FocusTrap", "SearchDialog"]
