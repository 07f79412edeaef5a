from __future__ import annotations

import re

from behave import given, then, when

from features.environment import run_markovian


@given('a corpus file "{name}" containing:')
def step_corpus_file(context, name: str) -> None:
    path = context.workdir / name
    path.write_text(context.text, encoding="utf-8")


@when('I run markovian "{arguments}"')
def step_run_markovian(context, arguments: str) -> None:
    run_markovian(context, arguments.split())


@then("the command succeeds")
def step_command_succeeds(context) -> None:
    result = context.last_result
    assert result.returncode == 0, result.stderr


@then("the command fails with exit code {code:d}")
def step_command_fails(context, code: int) -> None:
    assert context.last_result.returncode == code, context.last_result.returncode


@then("standard output has {count:d} lines")
def step_output_line_count(context, count: int) -> None:
    lines = context.last_result.stdout.splitlines()
    assert len(lines) == count, lines


@then('every output line starts with "{prefix}" and a number')
def step_output_prefix(context, prefix: str) -> None:
    for number, line in enumerate(context.last_result.stdout.splitlines(), start=1):
        assert line.startswith(f"{prefix} {number}:"), line


@then("every board walk starts on cell 1")
def step_board_walk_start(context) -> None:
    for line in context.last_result.stdout.splitlines():
        cells = re.findall(r"\[(\d+)\]", line)
        assert cells[0] == "1", line
        assert len(cells) <= 60, line


@then('standard error contains "{text}"')
def step_stderr_contains(context, text: str) -> None:
    assert text in context.last_result.stderr, context.last_result.stderr
