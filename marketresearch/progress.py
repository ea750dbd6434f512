"""console output for CLI research runs."""

from typing import Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn


class ProgressHandler:
    """shows a spinner while waiting on the provider and reports outcomes."""

    def __init__(self, quiet: bool = False, show_progress: bool = True) -> None:
        self.quiet = quiet
        self.show_progress = show_progress and not quiet
        self._console = Console(stderr=True)
        self._progress: Optional[Progress] = None
        self._task_id: Optional[TaskID] = None

    def __enter__(self) -> "ProgressHandler":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[object],
    ) -> None:
        self.stop()

    def start(self, description: str) -> None:
        """starts an indeterminate spinner."""
        if not self.show_progress:
            return

        # replaces any running spinner
        self.stop()

        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self._console,
            transient=True,
        )
        self._progress.start()
        self._task_id = self._progress.add_task(description, total=None)

    def stop(self) -> None:
        """stops the spinner if running."""
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task_id = None

    def log_error(self, message: str) -> None:
        """prints error message (always shown, even in quiet mode)."""
        self.stop()
        self._console.print(f"[red]ERROR:[/red] {message}")

    def log_info(self, message: str) -> None:
        """prints info message unless quiet."""
        if self.quiet:
            return

        self._console.print(message)
