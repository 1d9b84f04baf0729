import pytest
from rich.text import Text

from rustdrill import ui


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("hello")
    assert capsys.readouterr().out == "! hello\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("hello")
    out = capsys.readouterr().out
    assert out.startswith("⚠️ ")
    assert out.endswith(" hello\n")


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("compiled [ok]")
    assert capsys.readouterr().out == "✓ compiled [ok]\n"


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("done")
    assert capsys.readouterr().out.startswith("✅ done")


@pytest.mark.parametrize("text", ["plain", "[red]not markup[/red]", "a | b", "12"])
def test_bold_round_trips_text(text):
    rendered = Text.from_markup(ui.bold(text))
    assert rendered.plain == text
    assert str(rendered.spans[0].style) == "bold"


@pytest.mark.parametrize("text", ["plain", "[x]", 7])
def test_blue_round_trips_text(text):
    rendered = Text.from_markup(ui.blue(text))
    assert rendered.plain == str(text)
    assert str(rendered.spans[0].style) == "blue"