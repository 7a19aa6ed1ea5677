"""User interface components."""

from mediasort.ui.console import ConsoleUI, console
from mediasort.ui.display import (
    format_file_count,
    generate_tree_structure,
    display_tree,
    display_outcomes,
    display_failures,
    display_summary,
)
from mediasort.ui.interactive import clean_path_input, ask_source_folder

__all__ = [
    "ConsoleUI",
    "console",
    "format_file_count",
    "generate_tree_structure",
    "display_tree",
    "display_outcomes",
    "display_failures",
    "display_summary",
    "clean_path_input",
    "ask_source_folder",
]
