"""Two-column flow used by the projects section."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from cv_pdf.layout.context import RenderContext

logger = logging.getLogger(__name__)


class Column(str, Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def other(self) -> Column:
        return Column.RIGHT if self is Column.LEFT else Column.LEFT


@dataclass(frozen=True)
class Placement:
    column: Column
    x: float
    y: float


class ColumnFlow:
    """Independent left/right cursors that alternate per block.

    A block that does not fit its target column goes to the other column when
    that one has room; otherwise a new page is started and both cursors reset
    to the top.
    """

    def __init__(self, context: RenderContext, start_y: float | None = None):
        self.context = context
        margin = context.margin
        self.column_width = (context.page_config.width - 3 * margin) / 2
        self._x = {Column.LEFT: margin, Column.RIGHT: 2 * margin + self.column_width}
        start = context.y if start_y is None else start_y
        self._y = {Column.LEFT: start, Column.RIGHT: start}
        self.current = Column.LEFT

    @property
    def left_y(self) -> float:
        return self._y[Column.LEFT]

    @property
    def right_y(self) -> float:
        return self._y[Column.RIGHT]

    @property
    def lowest_y(self) -> float:
        return min(self._y.values())

    def place(self, height: float) -> Placement:
        """Choose where a block of ``height`` goes, paging if neither column has room."""
        column = self.current
        if not self.context.fits(height, self._y[column]):
            if self.context.fits(height, self._y[column.other]):
                column = column.other
            else:
                self.context.new_page()
                self._y = {Column.LEFT: self.context.y, Column.RIGHT: self.context.y}
                column = Column.LEFT
                logger.debug("Both columns full, continuing on page %d", self.context.page_number)
        self.current = column
        return Placement(column=column, x=self._x[column], y=self._y[column])

    def commit(self, placement: Placement, end_y: float) -> None:
        """Record where the placed block ended and switch to the other column."""
        self._y[placement.column] = end_y
        self.current = placement.column.other
