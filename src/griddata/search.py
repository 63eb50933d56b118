# src/griddata/search.py
import logging
from typing import List, Optional

from .context import GridContext
from .core import GridComponent

logger = logging.getLogger(__name__)


class SearchTextWriter:
    """Sink collecting the lines written during one searchable text traversal."""

    def __init__(self):
        self._lines: List[str] = []

    def write_line(self, text: str) -> None:
        self._lines.append(text)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def getvalue(self) -> str:
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)


class SearchTextVisitor:
    """
    Extracts the searchable text of a grid for indexing.

    The traversal is depth-first in document order: model, sections, rows,
    areas, controls and finally the control values. Structural levels only
    recurse; values write the text they hold, with markup replaced. Each call
    uses a fresh writer and leaves the tree untouched, so visiting the same
    tree twice gives the same lines.
    """

    def __init__(self, context: Optional[GridContext] = None):
        self.context = context or GridContext.create()

    def visit(self, node: GridComponent) -> List[str]:
        """Returns the lines of searchable text of `node` and everything below it."""
        writer = SearchTextWriter()
        self.write(node, writer)
        return writer.lines

    def write(self, node: GridComponent, writer: SearchTextWriter) -> None:
        """Writes the searchable text of `node` to an existing writer."""
        before = len(writer)
        node.write_searchable_text(self.context, writer)
        logger.debug("Wrote %d searchable line(s) for %s", len(writer) - before, type(node).__name__)
