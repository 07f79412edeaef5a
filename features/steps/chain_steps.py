from __future__ import annotations

import io
from typing import Any, Callable, List

from behave import given, then, when

from markovian.chain import MarkovChain, weighted_pick
from markovian.domains.board import build_board_chain
from markovian.domains.words import WordCapabilities


class _CountingWordCapabilities(WordCapabilities):
    def __init__(self) -> None:
        super().__init__(io.StringIO())
        self.released: List[str] = []

    def release(self, value: str) -> None:
        self.released.append(value)


class _ScriptedRandom:
    def __init__(self, value: int) -> None:
        self.value = value

    def randrange(self, stop: int) -> int:
        return min(self.value, stop - 1)


def _record_error(context, func: Callable[[], Any]) -> None:
    try:
        func()
        context.last_error = None
    except Exception as exc:  # noqa: BLE001 - BDD asserts error type and message explicitly
        context.last_error = exc


def _state(context, value: str):
    state = context.chain.get_state(value)
    assert state is not None, f"state {value!r} is not registered"
    return state


@given("an empty word chain")
def step_empty_word_chain(context) -> None:
    context.capabilities = _CountingWordCapabilities()
    context.chain = MarkovChain(context.capabilities)


@given("the snakes and ladders board chain")
def step_board_chain(context) -> None:
    context.chain = build_board_chain()


@given('I register the words "{words}"')
@when('I register the words "{words}"')
def step_register_words(context, words: str) -> None:
    for word in words.split():
        context.chain.add_state(word)


@when('I observe the text "{text}"')
@given('I observe the text "{text}"')
def step_observe_text(context, text: str) -> None:
    context.chain.observe_sequence(text.split())


@when('I record the transition "{source}" to "{target}" {times:d} times')
def step_record_transition(context, source: str, target: str, times: int) -> None:
    for _ in range(times):
        context.chain.add_transition(_state(context, source), _state(context, target))


@when("I pick a start state")
def step_pick_start(context) -> None:
    _record_error(context, lambda: context.chain.pick_start())


@when('I walk from "{value}" with at most {max_length:d} states')
def step_walk(context, value: str, max_length: int) -> None:
    reached = context.chain.generate(_state(context, value), max_length, rng=_ScriptedRandom(0))
    context.walk = [state.payload for state in reached]


@when("I close the chain")
def step_close_chain(context) -> None:
    context.chain.close()


@then("the chain has {count:d} states")
def step_chain_state_count(context, count: int) -> None:
    assert len(context.chain) == count, len(context.chain)


@then('the transition total of "{value}" is {total:d}')
def step_transition_total(context, value: str, total: int) -> None:
    assert _state(context, value).transitions.total == total


@then('weighted pick {random_value:d} from "{source}" returns "{target}"')
def step_weighted_pick(context, random_value: int, source: str, target: str) -> None:
    picked = weighted_pick(_state(context, source), random_value)
    assert picked.payload == target, picked.payload


@then('the walk is "{expected}"')
def step_walk_is(context, expected: str) -> None:
    assert context.walk == expected.split(), context.walk


@then("the walk is empty")
def step_walk_empty(context) -> None:
    assert context.walk == []


@then("an empty domain error is raised")
def step_empty_domain_error(context) -> None:
    from markovian.errors import EmptyDomainError

    assert isinstance(context.last_error, EmptyDomainError), context.last_error


@then('every state was released once: "{words}"')
def step_released_once(context, words: str) -> None:
    assert context.capabilities.released == words.split(), context.capabilities.released


@then("cell {number:d} moves to cells {targets} with count 1 each")
def step_cell_targets(context, number: int, targets: str) -> None:
    state = context.chain.registry[number - 1]
    expected = [int(part) for part in targets.split(",")]
    observed = [(entry.target.payload.number, entry.count) for entry in state.transitions]
    assert observed == [(target, 1) for target in expected], observed
    assert state.transitions.total == len(expected)
