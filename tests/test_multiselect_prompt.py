"""Tests for the multi-select prompt."""

from __future__ import annotations

import pytest
from readchar import key

from rich_select import (
    InvalidConfigurationError,
    ListOption,
    MultiSelectPrompt,
    SelectionAction,
    Validation,
    min_selections,
)
from rich_select.input import InputAction
from rich_select.types import ActionResult

FRUITS = ["apple", "banana", "apricot"]


def contains_scorer(text, value, display, index):
    return 0 if text in display else None


def test_toggle_first_and_third_then_submit(make_backend):
    backend = make_backend(" ", key.DOWN, key.DOWN, " ", key.ENTER)
    prompt = MultiSelectPrompt("Pick", ["one", "two", "three"])

    answer = prompt.prompt(backend)

    assert answer == [ListOption(0, "one"), ListOption(2, "three")]
    assert backend.entries("answer") == [("Pick", "one, three")]


def test_submit_with_nothing_checked_returns_empty_list(make_backend):
    prompt = MultiSelectPrompt("Pick", FRUITS)

    assert prompt.prompt(make_backend(key.ENTER)) == []


def test_validator_rejection_shows_error_and_keeps_loop_running(make_backend):
    backend = make_backend(key.ENTER)
    prompt = MultiSelectPrompt("Pick", FRUITS, validator=min_selections(1))

    with pytest.raises(EOFError):
        prompt.prompt(backend)

    assert prompt.error == "Please select at least 1 option"
    assert backend.entries("error") == ["Please select at least 1 option"]
    assert all(kind != "answer" for frame in backend.frames for kind, _ in frame)


def test_validator_accepts_after_user_fixes_selection(make_backend):
    backend = make_backend(key.ENTER, " ", key.ENTER)
    prompt = MultiSelectPrompt("Pick", FRUITS, validator=min_selections(1))

    assert prompt.prompt(backend) == [ListOption(0, "apple")]


def test_validator_receives_checked_options_in_index_order():
    seen = []

    def validator(selected):
        seen.append(list(selected))
        return Validation.valid()

    prompt = MultiSelectPrompt("Pick", FRUITS, default=[2, 0], validator=validator)

    prompt.submit()

    assert seen == [[ListOption(0, "apple"), ListOption(2, "apricot")]]


def test_toggle_twice_leaves_checked_set_unchanged():
    prompt = MultiSelectPrompt("Pick", FRUITS, default=[1])

    prompt.handle(SelectionAction.TOGGLE_CURRENT_OPTION)
    prompt.handle(SelectionAction.TOGGLE_CURRENT_OPTION)

    assert prompt.checked == {1}


def test_select_all_only_checks_filtered_options():
    prompt = MultiSelectPrompt("Pick", FRUITS, scorer=contains_scorer, default=[1])

    prompt.handle(InputAction.write("ap"))
    prompt.handle(SelectionAction.SELECT_ALL)

    assert prompt.scored.indices == [0, 2]
    assert prompt.checked == {0, 2}
    assert prompt.input.content == "ap"


def test_select_all_then_clear_empties_checked_set():
    prompt = MultiSelectPrompt("Pick", FRUITS, default=[0, 1])

    prompt.handle(SelectionAction.SELECT_ALL)
    prompt.handle(SelectionAction.CLEAR_SELECTIONS)

    assert prompt.checked == set()


def test_right_and_left_keys_select_all_and_clear(make_backend):
    backend = make_backend(key.RIGHT, key.LEFT, key.RIGHT, key.ENTER)
    prompt = MultiSelectPrompt("Pick", FRUITS)

    assert [option.index for option in prompt.prompt(backend)] == [0, 1, 2]


def test_checked_options_survive_being_filtered_out(make_backend):
    backend = make_backend("a", "p", key.ENTER)
    prompt = MultiSelectPrompt("Pick", FRUITS, scorer=contains_scorer, default=[1])

    answer = prompt.prompt(backend)

    assert prompt.scored.indices == [0, 2]
    assert answer == [ListOption(1, "banana")]


def test_filter_is_cleared_after_toggle_unless_kept():
    prompt = MultiSelectPrompt("Pick", FRUITS, scorer=contains_scorer, keep_filter=False)

    prompt.handle(InputAction.write("ap"))
    result = prompt.handle(SelectionAction.TOGGLE_CURRENT_OPTION)

    assert result == ActionResult.NEEDS_REDRAW
    assert prompt.checked == {0}
    assert prompt.input.is_empty()
    assert prompt.scored.indices == [0, 1, 2]


def test_empty_filter_is_left_alone_after_toggle():
    prompt = MultiSelectPrompt("Pick", FRUITS, keep_filter=False)

    assert prompt.clear_input_if_needed(SelectionAction.CLEAR_SELECTIONS) == ActionResult.CLEAN


def test_toggle_with_no_visible_option_is_a_no_op():
    prompt = MultiSelectPrompt("Pick", FRUITS, scorer=contains_scorer)

    prompt.handle(InputAction.write("zzz"))
    result = prompt.handle(SelectionAction.TOGGLE_CURRENT_OPTION)

    assert result == ActionResult.CLEAN
    assert prompt.checked == set()


def test_all_selected_by_default_overrides_default():
    prompt = MultiSelectPrompt("Pick", FRUITS, default=[0], all_selected_by_default=True)

    assert prompt.checked == {0, 1, 2}


def test_checked_set_is_rendered(make_backend):
    backend = make_backend(key.ENTER)
    MultiSelectPrompt("Pick", FRUITS, default=[2]).prompt(backend)

    page, checked = backend.entries("options", frame=0)[0]
    assert checked == {2}
    assert len(page) == 3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"options": []},
        {"options": FRUITS, "default": [3]},
        {"options": FRUITS, "default": [-1]},
        {"options": FRUITS, "starting_cursor": 3},
    ],
)
def test_invalid_configuration_fails_at_construction(kwargs):
    with pytest.raises(InvalidConfigurationError):
        MultiSelectPrompt("Pick", **kwargs)
