from collections.abc import Callable
from dataclasses import dataclass

import pytest
from rich.console import Console

from groot.cli import CLIContext, create_app


@dataclass(frozen=True, slots=True)
class CliResult:
    """Outcome of one CLI invocation."""

    exit_code: int
    stdout: str
    stderr: str


GrootCli = Callable[..., CliResult]


@pytest.fixture
def groot_cli(
    console: Console,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> GrootCli:
    """Create CLI app for testing.

    Returns a callable that runs the CLI through its meta app, so global
    options are parsed, and returns the exit code with captured output.
    """
    # Keep Rich from wrapping long paths and digests
    monkeypatch.setenv("COLUMNS", "250")
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> CliResult:
        _ = capsys.readouterr()
        try:
            app.meta(list(args))
        except SystemExit as e:
            code = e.code if isinstance(e.code, int) else int(e.code is not None)
        else:
            code = 0
        finally:
            CLIContext.reset()
        captured = capsys.readouterr()
        return CliResult(exit_code=code, stdout=captured.out, stderr=captured.err)

    return _run
