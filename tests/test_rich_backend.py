"""Tests for the Rich rendering backend."""

import io

import pytest
import readchar
from readchar import key
from rich.console import Console

from rich_select import (
    ListOption,
    MultiSelectPrompt,
    OperationInterruptedError,
    RichBackend,
    SelectPrompt,
)
from rich_select.input import Input
from rich_select.paginator import paginate


def make_console(width=20, height=10):
    return Console(
        file=io.StringIO(),
        width=width,
        height=height,
        force_terminal=False,
        color_system=None,
        highlight=False,
    )


def scripted_keys(monkeypatch, *keys):
    pending = list(keys)
    monkeypatch.setattr(readchar, "readkey", lambda: pending.pop(0))


def test_single_line_frame_measures_one_row():
    backend = RichBackend(make_console())

    backend.frame_setup()
    backend.render_select_prompt("Pick", Input())

    assert backend.current_flush_height() == 1


def test_wrapped_option_counts_every_row():
    backend = RichBackend(make_console(width=20))
    page = paginate(5, [ListOption(0, "x" * 50)], 0)

    backend.frame_setup()
    backend.render_select_prompt("Pick", None)
    backend.render_options(page)

    assert backend.current_flush_height() >= 4


def test_terminal_height_comes_from_console():
    assert RichBackend(make_console(height=10)).current_terminal_height() == 10


def test_aborted_frame_writes_nothing():
    console = make_console()
    backend = RichBackend(console)

    backend.frame_setup()
    backend.render_select_prompt("Pick", Input("abc"))
    backend.frame_abort()

    assert console.file.getvalue() == ""


def test_answer_frame_is_printed():
    console = make_console(width=40)
    backend = RichBackend(console)

    backend.frame_setup()
    backend.render_prompt_with_answer("Fruit?", "Apple")
    backend.frame_finish(True)

    assert "Fruit? Apple" in console.file.getvalue()


def test_select_prompt_on_rich_backend(monkeypatch):
    scripted_keys(monkeypatch, key.DOWN, key.ENTER)
    console = make_console(width=40)

    answer = SelectPrompt("Fruit?", ["Banana", "Apple"]).prompt(RichBackend(console))

    assert answer == ListOption(1, "Apple")
    assert "Fruit? Apple" in console.file.getvalue()


def test_multiselect_answer_lists_checked_options(monkeypatch):
    scripted_keys(monkeypatch, key.SPACE, key.DOWN, key.SPACE, key.ENTER)
    console = make_console(width=40)

    MultiSelectPrompt("Toppings?", ["Cheese", "Ham", "Olives"]).prompt(RichBackend(console))

    assert "Toppings? Cheese, Ham" in console.file.getvalue()


def test_keyboard_interrupt_while_reading_is_an_interrupt(monkeypatch):
    def raise_interrupt():
        raise KeyboardInterrupt

    monkeypatch.setattr(readchar, "readkey", raise_interrupt)

    with pytest.raises(OperationInterruptedError):
        SelectPrompt("Fruit?", ["Banana"]).prompt(RichBackend(make_console()))


def test_wrapping_options_shrink_the_page(monkeypatch):
    scripted_keys(monkeypatch, key.ENTER)
    long_options = [f"{i} " + "word " * 10 for i in range(10)]
    prompt = SelectPrompt("Pick", long_options, page_size=5, help_message="")

    prompt.prompt(RichBackend(make_console(width=20, height=8)))

    assert prompt.config.page_size < 5
