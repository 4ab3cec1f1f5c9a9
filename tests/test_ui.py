import pytest

from rustdrill import ui


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.setenv("CLICOLOR", "0")


@pytest.fixture
def coloured(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_emoji_picks_plain_when_disabled(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.emoji("🎉", "★") == "★"


def test_emoji_picks_fancy_by_default(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert ui.emoji("🎉", "★") == "🎉"


@pytest.mark.parametrize("style", [ui.red, ui.green, ui.blue, ui.bold])
def test_styles_are_identity_without_colour(plain, style):
    assert style("hello there") == "hello there"


@pytest.mark.parametrize("style", [ui.red, ui.green, ui.blue, ui.bold])
def test_styles_wrap_text_with_colour(coloured, style):
    styled = style("hello there")
    assert styled.startswith("\x1b[")
    assert styled.endswith("\x1b[0m")
    assert "hello there" in styled
    assert len(styled) > len("hello there")


def test_red_uses_red_code(coloured):
    assert ui.red("x") == "\x1b[31mx\x1b[0m"


def test_styles_accept_numbers(plain):
    assert ui.blue(3) == "3"


def test_warn_plain_output(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Ran example.rs with errors")
    assert capsys.readouterr().out == "! Ran example.rs with errors\n"


def test_success_plain_output(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran example.rs")
    assert capsys.readouterr().out == "✓ Successfully ran example.rs\n"


def test_success_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("done")
    assert capsys.readouterr().out == "✅ done\n"


def test_warn_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("oops")
    assert capsys.readouterr().out == "⚠️  oops\n"