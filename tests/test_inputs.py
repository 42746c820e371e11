"""Tests for argument parsing, prompting and model validation."""

from __future__ import annotations

import pytest

from iotex_setup import inputs
from iotex_setup.catalog import ModelKind
from iotex_setup.errors import MissingCredentialError, UnknownModelError
from iotex_setup.models import CliArgs


def test_parse_args_is_order_independent():
    args = inputs.parse_args(["--default", "gemini-2.5-flash", "sk-abc", "whisper-1"])

    assert args == CliArgs(
        api_key="sk-abc",
        llm_model="gemini-2.5-flash",
        audio_model="whisper-1",
        set_default=True,
    )


def test_parse_args_ignores_extra_positionals():
    args = inputs.parse_args(["sk-abc", "gemini-2.5-flash", "whisper-1", "extra"])

    assert args.llm_model == "gemini-2.5-flash"
    assert args.audio_model == "whisper-1"
    assert args.set_default is False


def test_parse_args_empty():
    assert inputs.parse_args([]) == CliArgs()


def test_parse_args_skips_empty_tokens():
    args = inputs.parse_args(["sk-x", "", "gemini-2.5-flash", "", "whisper-1"])

    assert args.llm_model == "gemini-2.5-flash"
    assert args.audio_model == "whisper-1"


def test_resolve_api_key_prefers_argument(scripted_terminal):
    terminal = scripted_terminal(["sk-typed"])

    assert inputs.resolve_api_key("sk-arg", terminal) == "sk-arg"
    assert terminal.prompts == []


def test_resolve_api_key_prompts_on_terminal(scripted_terminal, capsys):
    terminal = scripted_terminal(["sk-typed"])

    assert inputs.resolve_api_key(None, terminal) == "sk-typed"
    assert "https://gateway.iotex.ai/console/token" in terminal.prompts[0]
    assert "OpenClaw Setup" in capsys.readouterr().out


def test_resolve_api_key_empty_answer_is_missing_credential(scripted_terminal):
    with pytest.raises(MissingCredentialError, match="API key is required"):
        inputs.resolve_api_key(None, scripted_terminal([""]))


def test_resolve_api_key_without_terminal_is_missing_credential(scripted_terminal):
    terminal = scripted_terminal(["sk-never-read"], interactive=False)

    with pytest.raises(MissingCredentialError):
        inputs.resolve_api_key(None, terminal)
    assert terminal.prompts == []


@pytest.mark.parametrize("raw", ["", "abc", "0", "99", "-1", "+2", "1.5", "²"])
def test_coerce_menu_choice_falls_back_to_first_option(raw):
    assert inputs.coerce_menu_choice(raw, 2) == 1


def test_coerce_menu_choice_accepts_valid_numbers():
    assert inputs.coerce_menu_choice("2", 2) == 2
    assert inputs.coerce_menu_choice(" 3 ", 3) == 3


@pytest.mark.parametrize("answer", ["abc", "99"])
def test_menu_with_bad_input_picks_recommended(scripted_terminal, answer):
    terminal = scripted_terminal([answer])

    assert inputs.resolve_model_choice(None, ModelKind.LLM, terminal) == "gemini-2.5-flash-lite"


def test_menu_renders_numbered_entries_with_prices(scripted_terminal, capsys):
    terminal = scripted_terminal(["3"])

    choice = inputs.resolve_model_choice(None, ModelKind.AUDIO, terminal)

    out = capsys.readouterr().out
    assert choice == "whisper-1"
    assert "Select an audio transcription model:" in out
    assert "  1) Whisper Large V3 Turbo (fast) (openai/whisper-large-v3-turbo)" in out
    assert "$0.0015/min (recommended)" in out
    assert "$0.0060/min (recommended)" not in out
    assert terminal.prompts == ["Choose [1-3, default=1]: "]


def test_model_argument_skips_menu(scripted_terminal):
    terminal = scripted_terminal(["2"])

    assert inputs.resolve_model_choice("custom", ModelKind.LLM, terminal) == "custom"
    assert terminal.prompts == []


def test_non_interactive_model_choice_uses_recommended(scripted_terminal):
    terminal = scripted_terminal(interactive=False)

    assert inputs.resolve_model_choice(None, ModelKind.AUDIO, terminal) == (
        "openai/whisper-large-v3-turbo"
    )


def test_validate_model_lists_supported_ids():
    with pytest.raises(UnknownModelError) as exc_info:
        inputs.validate_model("gpt-5", ModelKind.LLM)

    assert exc_info.value.model_id == "gpt-5"
    assert exc_info.value.supported == ["gemini-2.5-flash-lite", "gemini-2.5-flash"]
    assert str(exc_info.value) == "Unknown LLM model 'gpt-5'."


def test_validate_model_accepts_catalog_ids():
    inputs.validate_model("openai/whisper-large-v3", ModelKind.AUDIO)


@pytest.mark.parametrize(
    ("answer", "expected"),
    [("y", True), ("YES", True), ("", False), ("n", False), ("maybe", False)],
)
def test_resolve_default_flag_asks_when_interactive(scripted_terminal, answer, expected):
    terminal = scripted_terminal([answer])

    assert inputs.resolve_default_flag(False, "gemini-2.5-flash", terminal) is expected
    assert "iotex/gemini-2.5-flash" in terminal.prompts[0]
    assert "[y/N]" in terminal.prompts[0]


def test_resolve_default_flag_explicit_flag_skips_question(scripted_terminal):
    terminal = scripted_terminal(["n"])

    assert inputs.resolve_default_flag(True, "gemini-2.5-flash", terminal) is True
    assert terminal.prompts == []


def test_resolve_default_flag_non_interactive_is_false(scripted_terminal):
    terminal = scripted_terminal(["y"], interactive=False)

    assert inputs.resolve_default_flag(False, "gemini-2.5-flash", terminal) is False


def test_resolve_request_fully_interactive(scripted_terminal):
    terminal = scripted_terminal(["sk-typed", "2", "", "y"])

    request = inputs.resolve_request(CliArgs(), terminal)

    assert request.api_key == "sk-typed"
    assert request.llm_model_id == "gemini-2.5-flash"
    assert request.audio_model_id == "openai/whisper-large-v3-turbo"
    assert request.set_as_default is True


def test_resolve_request_validates_argument_models_before_default_question(scripted_terminal):
    terminal = scripted_terminal(["y"])
    args = inputs.parse_args(["sk-abc", "gemini-2.5-flash", "whisper-9"])

    with pytest.raises(UnknownModelError, match="whisper-9"):
        inputs.resolve_request(args, terminal)
    assert terminal.prompts == []
