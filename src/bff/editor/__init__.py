"""Line-addressed editing on top of the buffer store."""

from bff.editor.formatting import format_line
from bff.editor.line_editor import LineEditor

__all__ = ["LineEditor", "format_line"]
