"""Dispatching parsed operations to their handlers."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Protocol, TextIO

from . import __version__
from .constants import (
    CLI_HELP_HINT,
    EXIT_FAILURE,
    EXIT_OK,
    STDERR_ERROR_PREFIX,
)
from .errors import KubeswitchError, UnhandledOperationError
from .operations import (
    ALL_OPERATIONS,
    CURRENT_ITEM,
    PREVIOUS_ITEM,
    CurrentOperation,
    DeleteOperation,
    HelpOperation,
    InteractiveDeleteOperation,
    InteractiveSwitchOperation,
    ListOperation,
    Operation,
    RenameOperation,
    SwitchOperation,
    UnsetOperation,
    UnsupportedOperation,
    VersionOperation,
)
from .variants import ToolVariant, render_usage

logger = logging.getLogger(__name__)

Handler = Callable[[Operation], int]


class Backend(Protocol):
    """Configuration store and picker side of the tool.

    Each method performs one operation and returns the process exit code.
    Failures are reported by raising a KubeswitchError subclass.
    """

    def list_items(self, op: ListOperation) -> int: ...

    def show_current(self, op: CurrentOperation) -> int: ...

    def switch(self, op: SwitchOperation) -> int: ...

    def rename(self, op: RenameOperation) -> int: ...

    def delete(self, op: DeleteOperation) -> int: ...

    def unset(self, op: UnsetOperation) -> int: ...

    def interactive_switch(self, op: InteractiveSwitchOperation) -> int: ...

    def interactive_delete(self, op: InteractiveDeleteOperation) -> int: ...


class DescribeBackend:
    """Backend with no configuration store attached.

    Prints what each operation would do, in the vocabulary of the variant.
    """

    def __init__(self, variant: ToolVariant, out: TextIO | None = None) -> None:
        self._noun = variant.item_noun
        self._out = out

    def _emit(self, line: str) -> int:
        print(line, file=self._out)
        return EXIT_OK

    def _name(self, target: str) -> str:
        if target == CURRENT_ITEM:
            return f"the current {self._noun}"
        return f"{self._noun} '{target}'"

    def list_items(self, op: ListOperation) -> int:
        return self._emit(f"list {self._noun}s")

    def show_current(self, op: CurrentOperation) -> int:
        return self._emit(f"show the current {self._noun}")

    def switch(self, op: SwitchOperation) -> int:
        if op.target == PREVIOUS_ITEM:
            line = f"switch to the previous {self._noun}"
        else:
            line = f"switch to {self._name(op.target)}"
        if op.force:
            line += " (without existence check)"
        return self._emit(line)

    def rename(self, op: RenameOperation) -> int:
        return self._emit(f"rename {self._name(op.old_name)} to '{op.new_name}'")

    def delete(self, op: DeleteOperation) -> int:
        for target in op.targets:
            self._emit(f"delete {self._name(target)}")
        return EXIT_OK

    def unset(self, op: UnsetOperation) -> int:
        return self._emit(f"unset the current {self._noun}")

    def interactive_switch(self, op: InteractiveSwitchOperation) -> int:
        line = f"pick a {self._noun} to switch to"
        if op.queries:
            line += f" matching '{' '.join(op.queries)}'"
        return self._emit(line)

    def interactive_delete(self, op: InteractiveDeleteOperation) -> int:
        return self._emit(f"pick {self._noun}s to delete")


class Executor:
    """Runs one operation and returns the exit code.

    Construction fails if any operation type lacks a handler, so a new
    operation cannot be silently ignored.
    """

    def __init__(
        self,
        variant: ToolVariant,
        backend: Backend,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._variant = variant
        self._out = out
        self._err = err
        self._handlers: dict[type[Operation], Handler] = {
            HelpOperation: self._exec_help,
            VersionOperation: self._exec_version,
            UnsupportedOperation: self._exec_unsupported,
            ListOperation: backend.list_items,
            CurrentOperation: backend.show_current,
            SwitchOperation: backend.switch,
            RenameOperation: backend.rename,
            DeleteOperation: backend.delete,
            UnsetOperation: backend.unset,
            InteractiveSwitchOperation: backend.interactive_switch,
            InteractiveDeleteOperation: backend.interactive_delete,
        }
        check_handlers(self._handlers)

    def execute(self, op: Operation) -> int:
        handler = self._handlers.get(type(op))
        if handler is None:
            raise UnhandledOperationError([type(op).__name__])

        logger.info("Executing %s", op)
        try:
            return handler(op)
        except KubeswitchError as exc:
            logger.warning("%s failed: %s", type(op).__name__, exc)
            self._print_err(f"{STDERR_ERROR_PREFIX}{exc}")
            return EXIT_FAILURE

    def _exec_help(self, op: Operation) -> int:
        self._print_out(render_usage(self._variant))
        return EXIT_OK

    def _exec_version(self, op: Operation) -> int:
        self._print_out(__version__)
        return EXIT_OK

    def _exec_unsupported(self, op: UnsupportedOperation) -> int:
        self._print_err(f"{STDERR_ERROR_PREFIX}{op.message}")
        self._print_err(CLI_HELP_HINT.format(command=self._variant.command))
        return EXIT_FAILURE

    def _print_out(self, text: str) -> None:
        print(text, file=self._out)

    def _print_err(self, text: str) -> None:
        print(text, file=self._err if self._err is not None else sys.stderr)


def check_handlers(handlers: dict[type[Operation], Handler]) -> None:
    """Raise UnhandledOperationError unless every operation type is covered."""
    missing = [op_type.__name__ for op_type in ALL_OPERATIONS if op_type not in handlers]
    if missing:
        raise UnhandledOperationError(missing)
