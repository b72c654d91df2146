"""
Text rendering for Matrix.

One line per row, elements space-separated inside brackets:

    [ 1 2 3 ]
    [ 4 5 6 ]

A debugging aid, not an interchange format.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


DEFAULT_ELEMENT_FORMAT = 'g'


def render_row(row: NDArray[np.floating[Any]], spec: str = DEFAULT_ELEMENT_FORMAT) -> str:
    """Render a single row as '[ a b c ]'."""
    parts = ['[']
    parts.extend(format(float(value), spec) for value in row)
    parts.append(']')
    return ' '.join(parts)


def render(values: NDArray[np.floating[Any]], spec: str = DEFAULT_ELEMENT_FORMAT) -> str:
    """
    Render a 2D array as bracketed rows joined by newlines.

    Args:
        values: 2D array to render
        spec: Format spec applied to each element (default 'g')

    Returns:
        Rendered text; the empty string for an array with no rows
    """
    return '\n'.join(render_row(row, spec) for row in values)
