"""Caret extraction from Textual inputs."""

from __future__ import annotations

from typing import Optional

from textual.widgets import Input

from mention_scan.context.offsets import TextRange, caret_range_from_indices


def caret_range(input_widget: Input) -> Optional[TextRange]:
    """Return the caret/selection of *input_widget* as a UTF-16 :class:`TextRange`.

    Textual reports the selection in code points, possibly reversed when
    the user selects leftwards.  ``None`` is returned when the widget has no
    selection to report.
    """
    selection = getattr(input_widget, "selection", None)
    if selection is None:
        return None
    return caret_range_from_indices(input_widget.value, selection.start, selection.end)
