"""Command-line argument interpretation for kctx and kns."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .constants import (
    FLAG_PREFIX,
    FLAGS_CURRENT,
    FLAGS_DELETE,
    FLAGS_FORCE,
    FLAGS_HELP,
    FLAGS_UNSET,
    FLAGS_VERSION,
    MSG_NEEDS_ARGUMENTS,
    MSG_TOO_MANY_ARGUMENTS,
    MSG_UNSUPPORTED_OPTION,
    RENAME_SEPARATOR,
)
from .operations import (
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
from .variants import ToolVariant

logger = logging.getLogger(__name__)

Probe = Callable[[], bool]


class ArgParser:
    """Maps raw arguments to exactly one operation.

    The two probes are injected so parsing stays free of terminal and
    environment access. Each probe is called at most once per parse, and
    only when the outcome depends on it.
    """

    def __init__(
        self,
        variant: ToolVariant,
        is_interactive: Probe,
        is_fallback_enabled: Probe,
        self_command: str = "",
    ) -> None:
        self._variant = variant
        self._is_interactive = is_interactive
        self._is_fallback_enabled = is_fallback_enabled
        self._self_command = self_command

    def parse_args(self, argv: Sequence[str] | None) -> Operation:
        args = list(argv) if argv else []
        op = self._parse(args)
        logger.debug("%s %r -> %r", self._variant.command, args, op)
        return op

    def _parse(self, args: list[str]) -> Operation:
        if any(arg in FLAGS_HELP for arg in args):
            return HelpOperation()

        if not args:
            if self._is_interactive():
                return InteractiveSwitchOperation(self_command=self._self_command)
            return ListOperation()

        if args[0] in FLAGS_DELETE:
            return self._parse_delete(args[0], args[1:])

        if len(args) == 1:
            return self._parse_single(args[0])

        if len(args) == 2 and self._variant.supports_force:
            op = self._parse_force_pair(args[0], args[1])
            if op is not None:
                return op

        if self._fallback_active():
            return InteractiveSwitchOperation(
                queries=tuple(args), self_command=self._self_command
            )
        return UnsupportedOperation(MSG_TOO_MANY_ARGUMENTS)

    def _parse_delete(self, flag: str, targets: list[str]) -> Operation:
        if targets:
            return DeleteOperation(targets=tuple(targets))
        if self._is_interactive():
            return InteractiveDeleteOperation(self_command=self._self_command)
        return UnsupportedOperation(MSG_NEEDS_ARGUMENTS.format(flag=flag))

    def _parse_single(self, token: str) -> Operation:
        if token in FLAGS_VERSION:
            return VersionOperation()
        if token in FLAGS_CURRENT:
            return CurrentOperation()
        if token in FLAGS_UNSET and self._variant.supports_unset:
            return UnsetOperation()

        rename = _parse_rename(token)
        if rename is not None:
            return rename

        if token == PREVIOUS_ITEM:
            return SwitchOperation(target=PREVIOUS_ITEM)
        if _is_flag(token):
            return UnsupportedOperation(MSG_UNSUPPORTED_OPTION.format(flag=token))

        if self._fallback_active():
            return InteractiveSwitchOperation(
                queries=(token,), self_command=self._self_command
            )
        return SwitchOperation(target=token)

    def _parse_force_pair(self, first: str, second: str) -> Operation | None:
        if second in FLAGS_FORCE:
            target = first
        elif first in FLAGS_FORCE:
            target = second
        else:
            return None
        if _is_flag(target):
            return UnsupportedOperation(MSG_UNSUPPORTED_OPTION.format(flag=target))
        return SwitchOperation(target=target, force=True)

    def _fallback_active(self) -> bool:
        return self._is_interactive() and self._is_fallback_enabled()


def _is_flag(token: str) -> bool:
    return token.startswith(FLAG_PREFIX) and token != PREVIOUS_ITEM


def _parse_rename(token: str) -> RenameOperation | None:
    new_name, sep, old_name = token.partition(RENAME_SEPARATOR)
    if not sep or not new_name or not old_name:
        return None
    return RenameOperation(new_name=new_name, old_name=old_name)
