"""Console presentation of emitter registries.

Renders the events and listeners of an ``EventEmitter`` as a rich table,
which is handy when tracking down leaked or duplicated subscriptions.
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core import EventEmitter
from ...utils import format_callback, format_event


class RegistryPresenter:
    """Displays the listeners registered on an emitter.

    Example:
        emitter = EventEmitter()
        emitter.on('ready', on_ready)

        presenter = RegistryPresenter()
        presenter.show(emitter)
    """

    def __init__(self, console: Optional[Console] = None):
        """Initialize presenter.

        Args:
            console: Rich console to print to (defaults to stdout)
        """
        self.console = console or Console()

    def build_table(self, emitter: EventEmitter) -> Table:
        """Build a table with one row per event.

        Args:
            emitter: Emitter to inspect

        Returns:
            Table listing event, listener count and callback names
        """
        table = Table(box=box.SIMPLE, header_style=None)

        table.add_column("Event", no_wrap=True)
        table.add_column("Count", no_wrap=True, justify="right")
        table.add_column("Listeners")

        for event in emitter.event_names():
            callbacks = emitter.listeners(event)
            count = len(callbacks)
            limit = emitter.get_max_listeners()

            if limit and count > limit:
                count_display = f"[bold red]{count}[/bold red]"
            else:
                count_display = str(count)

            table.add_row(
                escape(format_event(event)),
                count_display,
                escape(", ".join(format_callback(cb) for cb in callbacks))
            )

        return table

    def show(self, emitter: EventEmitter):
        """Print the registry of an emitter.

        Args:
            emitter: Emitter to inspect
        """
        if not emitter.event_names():
            self.console.print("No listeners registered.")
            return
        self.console.print(self.build_table(emitter))
