"""Selection model, block expansion and code-block lookup."""

from .models import Position, Selection, selections_equal
from .code_block import (
    LineRange,
    code_block_selection,
    is_inside_fence,
    locate_code_block,
)
from .expander import (
    SelectOutcome,
    expand_selection,
    expand_selections,
    run_select_block,
)

__all__ = [
    "LineRange",
    "Position",
    "SelectOutcome",
    "Selection",
    "code_block_selection",
    "expand_selection",
    "expand_selections",
    "is_inside_fence",
    "locate_code_block",
    "run_select_block",
    "selections_equal",
]
