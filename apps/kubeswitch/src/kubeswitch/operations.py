"""Operation values produced by the argument parser."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import UsageError

CURRENT_ITEM = "."
PREVIOUS_ITEM = "-"


@dataclass(frozen=True)
class Operation:
    pass


@dataclass(frozen=True)
class ListOperation(Operation):
    pass


@dataclass(frozen=True)
class CurrentOperation(Operation):
    pass


@dataclass(frozen=True)
class UnsetOperation(Operation):
    pass


@dataclass(frozen=True)
class HelpOperation(Operation):
    pass


@dataclass(frozen=True)
class VersionOperation(Operation):
    pass


@dataclass(frozen=True)
class SwitchOperation(Operation):
    target: str  # item name, or "-" for the previous item
    force: bool = False


@dataclass(frozen=True)
class DeleteOperation(Operation):
    targets: tuple[str, ...]  # "." stands for the current item


@dataclass(frozen=True)
class RenameOperation(Operation):
    new_name: str
    old_name: str  # "." stands for the current item


@dataclass(frozen=True)
class InteractiveSwitchOperation(Operation):
    queries: tuple[str, ...] = ()
    # Path of the running executable; environment-dependent, so not compared.
    self_command: str = field(default="", compare=False)


@dataclass(frozen=True)
class InteractiveDeleteOperation(Operation):
    self_command: str = field(default="", compare=False)


@dataclass(frozen=True)
class UnsupportedOperation(Operation):
    message: str

    @property
    def error(self) -> UsageError:
        return UsageError(self.message)


ALL_OPERATIONS: tuple[type[Operation], ...] = (
    ListOperation,
    CurrentOperation,
    UnsetOperation,
    HelpOperation,
    VersionOperation,
    SwitchOperation,
    DeleteOperation,
    RenameOperation,
    InteractiveSwitchOperation,
    InteractiveDeleteOperation,
    UnsupportedOperation,
)
