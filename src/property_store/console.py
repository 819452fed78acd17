"""
Line-oriented command console for a PropertyRegistry.

Commands (case-sensitive):
    GET name | GET *      print one value or every ``name = value`` pair
    SET name=value        update a defined property or define a new one
    DELETE name           remove a property
    LIST                  table of names, kinds and values
    EXIT                  leave the console
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, Optional, TextIO, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .registry import PropertyRegistry

logger = logging.getLogger(__name__)

EXIT_COMMAND = "EXIT"

WRONG_SYNTAX = "Wrong syntax."
UNKNOWN_COMMAND = "Unknown command."
NOT_DEFINED = "Property not defined."
EMPTY_STORE = "No properties defined in the storage."
PROPERTY_ADDED = "New property was added to the storage."
PROPERTY_DELETED = "Property was deleted."


def split_text(text: str, delimiter: str) -> Tuple[str, str]:
    """Split on the first ``delimiter``; the head is trimmed, the tail kept verbatim."""
    idx = text.find(delimiter)
    if idx == -1:
        return text.strip(), ""
    return text[:idx].strip(), text[idx + len(delimiter):]


class PropertyConsole:
    """Read commands from a stream and apply them to a registry."""

    def __init__(
        self,
        registry: PropertyRegistry,
        console: Optional[Console] = None,
        prompt: str = ">",
    ) -> None:
        self.registry = registry
        self.console = console or Console()
        self.prompt = prompt
        self._handlers: Dict[str, Callable[[str], None]] = {
            "GET": self._get,
            "SET": self._set,
            "DELETE": self._delete,
            "LIST": self._list,
        }

    def _emit(self, text: str = "", end: str = "\n") -> None:
        self.console.print(text, end=end, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def run(self, stream: Optional[TextIO] = None) -> int:
        """Process commands until ``EXIT`` or end of input."""
        stream = stream or sys.stdin
        if self.registry.name:
            self._emit(f"Console for storage: [{self.registry.name}]")
            self._emit()

        while True:
            self._emit(self.prompt, end="")
            line = stream.readline()
            if not line:
                logger.debug("End of input, leaving console")
                self._emit()
                break
            if not self.execute(line.rstrip("\r\n")):
                self._emit()
                break
            self._emit()
        return 0

    def execute(self, line: str) -> bool:
        """Run one command line; returns False once the console should stop."""
        command, argument = split_text(line.lstrip(), " ")
        if command == EXIT_COMMAND:
            return False

        handler = self._handlers.get(command)
        if handler is None:
            self._emit(UNKNOWN_COMMAND)
            return True

        logger.debug("Command %s %r", command, argument)
        handler(argument)
        return True

    def _get(self, argument: str) -> None:
        name = argument.strip()
        if not name:
            self._emit(WRONG_SYNTAX)
        elif name == "*":
            lines = self.registry.dump()
            if not lines:
                self._emit(EMPTY_STORE)
            for entry in lines:
                self._emit(entry)
        else:
            result = self.registry.get(name)
            self._emit(result.value.render() if result else NOT_DEFINED)

    def _set(self, argument: str) -> None:
        name, value = split_text(argument, "=")
        if not name or not value:
            self._emit(WRONG_SYNTAX)
            return

        if self.registry.is_defined(name):
            result = self.registry.set_from_text(name, value)
            if not result:
                self._emit(result.message)
            return

        # Unknown names are defined on the fly with an inferred kind.
        result = self.registry.define_from_text(name, value)
        self._emit(PROPERTY_ADDED if result else result.message)

    def _delete(self, argument: str) -> None:
        name = argument.strip()
        if not name:
            self._emit(WRONG_SYNTAX)
            return
        result = self.registry.delete(name)
        self._emit(PROPERTY_DELETED if result else result.message)

    def _list(self, argument: str) -> None:
        if not len(self.registry):
            self._emit(EMPTY_STORE)
            return

        table = Table(title=f"Storage: {self.registry.name}" if self.registry.name else None, show_header=True)
        table.add_column("Property", style="cyan", no_wrap=True)
        table.add_column("Kind", style="magenta")
        table.add_column("Value", justify="right")
        for name, prop in self.registry.items():
            table.add_row(Text(name), prop.kind.value, Text(prop.render()))
        self.console.print(table)
