"""Interactive prompts."""

from pathlib import Path

from mediasort.ui.console import ConsoleUI, console


def clean_path_input(response: str) -> str:
    """
    Strip whitespace and surrounding quotes from a typed path.

    Paths dragged into a terminal often arrive quoted.
    """
    response = response.strip()
    if len(response) >= 2 and response[0] == response[-1] and response[0] in "'\"":
        response = response[1:-1].strip()
    return response


def ask_source_folder(ui: ConsoleUI = console) -> Path:
    """
    Ask the operator for the folder to organize.

    Re-asks until a non-empty answer is given. Validation of the
    folder is left to the caller.

    Returns:
        The folder typed by the operator.
    """
    while True:
        ui.print("[bold cyan]📂 Folder to organize[/bold cyan]")
        response = clean_path_input(ui.ask("➤ Path: "))
        if response:
            return Path(response).expanduser()
        ui.notify("warning", "Please enter a folder path.")
