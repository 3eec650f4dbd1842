"""CLI entry points and startup wiring."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping, Sequence
from typing import NoReturn, TextIO

from .config import Settings
from .constants import (
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    INTERRUPTED_MESSAGE,
    STDERR_UNEXPECTED_PREFIX,
)
from .executor import Backend, DescribeBackend, Executor
from .logging_utils import setup_logging
from .parser import ArgParser
from .probes import make_fallback_probe, make_interactive_probe
from .variants import CONTEXT_VARIANT, NAMESPACE_VARIANT, ToolVariant

logger = logging.getLogger(__name__)


def run(
    variant: ToolVariant,
    argv: Sequence[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    backend: Backend | None = None,
    self_command: str | None = None,
) -> int:
    """Parse arguments once, execute the resulting operation, return the exit code."""
    args = list(argv) if argv is not None else sys.argv[1:]
    err = stderr if stderr is not None else sys.stderr

    settings = Settings.from_env(variant, environ)
    setup_logging(settings)

    parser = ArgParser(
        variant,
        is_interactive=make_interactive_probe(settings, stdout),
        is_fallback_enabled=make_fallback_probe(settings),
        self_command=self_command if self_command is not None else sys.argv[0],
    )
    op = parser.parse_args(args)

    if backend is None:
        backend = DescribeBackend(variant, stdout)
    executor = Executor(variant, backend, out=stdout, err=err)

    try:
        return executor.execute(op)
    except KeyboardInterrupt:
        print(file=err)
        print(INTERRUPTED_MESSAGE, file=err)
        return EXIT_INTERRUPTED
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected failure running %s", op)
        print(f"{STDERR_UNEXPECTED_PREFIX}{exc}", file=err)
        return EXIT_FAILURE


def main_context() -> NoReturn:
    """Entry point of the context tool (kctx)."""
    sys.exit(run(CONTEXT_VARIANT))


def main_namespace() -> NoReturn:
    """Entry point of the namespace tool (kns)."""
    sys.exit(run(NAMESPACE_VARIANT))
