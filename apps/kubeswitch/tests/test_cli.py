"""Tests for CLI wiring and exit codes."""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path

import pytest

import kubeswitch.cli as cli_module
from kubeswitch.config import Settings
from kubeswitch.errors import BackendError
from kubeswitch.logging_utils import setup_logging
from kubeswitch.operations import (
    InteractiveSwitchOperation,
    ListOperation,
    SwitchOperation,
)
from kubeswitch.variants import CONTEXT_VARIANT, NAMESPACE_VARIANT

from test_helpers import RecordingBackend, TtyStream


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.disable(logging.NOTSET)


def test_run_switches_by_name() -> None:
    backend = RecordingBackend()

    code = cli_module.run(
        CONTEXT_VARIANT, ["prod"], environ={}, stdout=io.StringIO(), backend=backend
    )

    assert code == 0
    assert backend.calls == [("switch", SwitchOperation(target="prod"))]


def test_run_lists_when_output_is_not_a_terminal() -> None:
    backend = RecordingBackend()

    code = cli_module.run(CONTEXT_VARIANT, [], environ={}, stdout=io.StringIO(), backend=backend)

    assert code == 0
    assert backend.calls == [("list_items", ListOperation())]


def test_run_uses_picker_on_terminal_with_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("kubeswitch.probes.shutil.which", lambda _name: "/usr/bin/fzf")
    backend = RecordingBackend()

    code = cli_module.run(
        NAMESPACE_VARIANT,
        ["kube", "sys"],
        environ={"KUBENS_FZF_USE_QUERY": "1"},
        stdout=TtyStream(),
        backend=backend,
        self_command="/opt/bin/kns",
    )

    assert code == 0
    name, op = backend.calls[0]
    assert name == "interactive_switch"
    assert op == InteractiveSwitchOperation(queries=("kube", "sys"))
    assert isinstance(op, InteractiveSwitchOperation)
    assert op.self_command == "/opt/bin/kns"


def test_run_ignores_picker_when_requested(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("kubeswitch.probes.shutil.which", lambda _name: "/usr/bin/fzf")
    backend = RecordingBackend()

    cli_module.run(
        CONTEXT_VARIANT,
        [],
        environ={"KUBECTX_IGNORE_FZF": "1"},
        stdout=TtyStream(),
        backend=backend,
    )

    assert backend.calls == [("list_items", ListOperation())]


def test_run_reports_unsupported_option() -> None:
    err = io.StringIO()
    backend = RecordingBackend()

    code = cli_module.run(
        CONTEXT_VARIANT, ["-x"], environ={}, stdout=io.StringIO(), stderr=err, backend=backend
    )

    assert code == 1
    assert "ERROR: unsupported option '-x'" in err.getvalue()
    assert backend.calls == []


def test_run_reports_backend_failure() -> None:
    err = io.StringIO()

    code = cli_module.run(
        CONTEXT_VARIANT,
        ["prod"],
        environ={},
        stdout=io.StringIO(),
        stderr=err,
        backend=RecordingBackend(fail_with=BackendError("no such context")),
    )

    assert code == 1
    assert "ERROR: no such context" in err.getvalue()


def test_run_handles_unexpected_errors() -> None:
    err = io.StringIO()

    code = cli_module.run(
        CONTEXT_VARIANT,
        ["prod"],
        environ={},
        stdout=io.StringIO(),
        stderr=err,
        backend=RecordingBackend(fail_with=RuntimeError("boom")),
    )

    assert code == 1
    assert "ERROR: Unexpected: boom" in err.getvalue()


def test_run_handles_keyboard_interrupt() -> None:
    err = io.StringIO()

    code = cli_module.run(
        CONTEXT_VARIANT,
        [],
        environ={},
        stdout=io.StringIO(),
        stderr=err,
        backend=RecordingBackend(fail_with=KeyboardInterrupt()),
    )

    assert code == 130
    assert "Interrupted." in err.getvalue()


def test_run_defaults_to_describe_backend() -> None:
    out = io.StringIO()

    code = cli_module.run(CONTEXT_VARIANT, ["-d", ".", "old"], environ={}, stdout=out)

    assert code == 0
    assert out.getvalue() == "delete the current context\ndelete context 'old'\n"


def test_main_context_exits_with_run_result(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["kctx", "--help"])

    with pytest.raises(SystemExit) as exc_info:
        cli_module.main_context()

    assert exc_info.value.code == 0
    assert "kctx -u, --unset" in capsys.readouterr().out


def test_main_namespace_exits_non_zero_on_bad_args(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["kns", "a", "b", "c"])
    monkeypatch.delenv("KUBENS_FZF_USE_QUERY", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        cli_module.main_namespace()

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "ERROR: too many arguments" in err
    assert "Run 'kns --help' for usage." in err


def test_setup_logging_writes_debug_records_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "kctx.log"

    setup_logging(Settings(debug=True, log_file=log_file))
    logging.getLogger("kubeswitch.test").debug("parsed %s", "prod")

    assert "DEBUG kubeswitch.test: parsed prod" in log_file.read_text(encoding="utf-8")


def test_setup_logging_disabled_by_default() -> None:
    setup_logging(Settings())

    assert logging.getLogger("kubeswitch").isEnabledFor(logging.CRITICAL) is False
