from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from markovian.cli import main as markovian_main


def _repo_root() -> Path:
    """
    Resolve the repository root directory.

    :return: Repository root path.
    :rtype: Path
    """
    return Path(__file__).resolve().parent.parent


def before_scenario(context, scenario) -> None:
    """
    Behave hook executed before each scenario.

    :param context: Behave context object.
    :type context: object
    :param scenario: Behave scenario.
    :type scenario: object
    :return: None.
    :rtype: None
    """
    context._tmp = tempfile.TemporaryDirectory(prefix="markovian-bdd-")
    context.workdir = Path(context._tmp.name)
    context.repo_root = _repo_root()
    context.last_result = None
    context.last_error = None
    context.chain = None
    context.capabilities = None


def after_scenario(context, scenario) -> None:
    """
    Behave hook executed after each scenario.

    :param context: Behave context object.
    :type context: object
    :param scenario: Behave scenario.
    :type scenario: object
    :return: None.
    :rtype: None
    """
    chain = getattr(context, "chain", None)
    if chain is not None:
        chain.close()
        context.chain = None
    if hasattr(context, "_tmp"):
        context._tmp.cleanup()


@dataclass
class RunResult:
    """
    Captured command-line interface execution result.

    :ivar returncode: Process exit code.
    :vartype returncode: int
    :ivar stdout: Captured standard output.
    :vartype stdout: str
    :ivar stderr: Captured standard error.
    :vartype stderr: str
    """

    returncode: int
    stdout: str
    stderr: str


def run_markovian(
    context,
    args: Sequence[str],
    *,
    cwd: Optional[Path] = None,
) -> RunResult:
    """
    Run the Markovian command-line interface in-process for coverage capture.

    :param context: Behave context object.
    :type context: object
    :param args: Command-line interface argument list.
    :type args: Sequence[str]
    :param cwd: Optional working directory.
    :type cwd: Path or None
    :return: Captured execution result.
    :rtype: RunResult
    """
    import contextlib
    import io

    out = io.StringIO()
    err = io.StringIO()

    prev_cwd = os.getcwd()
    try:
        os.chdir(str(cwd or context.workdir))
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            try:
                code = int(markovian_main(list(args)) or 0)
            except SystemExit as e:
                if isinstance(e.code, int):
                    code = e.code
                else:
                    code = 1
    finally:
        os.chdir(prev_cwd)

    result = RunResult(returncode=code, stdout=out.getvalue(), stderr=err.getvalue())
    context.last_result = result
    return result
