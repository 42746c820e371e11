"""Collect the API key, model choices and default flag for a setup run.

Values given on the command line always win; missing values are asked for
on the controlling terminal. Model ids are validated against the catalog
whichever way they were obtained.
"""

from __future__ import annotations

from .catalog import ModelKind, is_known, known_ids, models_for, recommended
from .constants import API_KEY_PREFIX, FLAG_SET_DEFAULT
from .errors import MissingCredentialError, UnknownModelError
from .models import CliArgs, SetupRequest
from .presenters import (
    render_api_key_prompt,
    render_banner,
    render_default_question,
    render_menu,
    render_menu_prompt,
)
from .terminal import LineReader

MENU_TITLES = {
    ModelKind.LLM: "Select an LLM model:",
    ModelKind.AUDIO: "Select an audio transcription model:",
}


def parse_args(argv: list[str]) -> CliArgs:
    """Sort CLI tokens by role.

    ``--default`` may appear anywhere. A token starting with ``sk-`` is the
    API key. The first other token is the LLM model, the second the audio
    model; anything after that is ignored. Empty tokens fill no slot.
    """
    api_key: str | None = None
    positional: list[str] = []
    set_default = False

    for token in argv:
        if token == FLAG_SET_DEFAULT:
            set_default = True
        elif token.startswith(API_KEY_PREFIX):
            api_key = token
        elif token:
            positional.append(token)

    return CliArgs(
        api_key=api_key,
        llm_model=positional[0] if len(positional) > 0 else None,
        audio_model=positional[1] if len(positional) > 1 else None,
        set_default=set_default,
    )


def resolve_api_key(arg_value: str | None, terminal: LineReader) -> str:
    """Return the API key from the argument or a terminal prompt.

    Raises:
        MissingCredentialError: If no key was given either way
    """
    if arg_value:
        return arg_value

    if terminal.interactive:
        for line in render_banner():
            print(line)
        key = terminal.read_line(render_api_key_prompt())
        if key:
            return key

    raise MissingCredentialError()


def coerce_menu_choice(raw: str, count: int) -> int:
    """Map menu input to a 1-based choice; anything invalid means 1."""
    value = raw.strip()
    if not (value.isascii() and value.isdigit()):
        return 1
    choice = int(value)
    if choice < 1 or choice > count:
        return 1
    return choice


def pick_from_menu(kind: ModelKind, terminal: LineReader) -> str:
    entries = models_for(kind)
    for line in render_menu(MENU_TITLES[kind], entries):
        print(line)
    raw = terminal.read_line(render_menu_prompt(len(entries)))
    return entries[coerce_menu_choice(raw, len(entries)) - 1].id


def resolve_model_choice(
    arg_value: str | None, kind: ModelKind, terminal: LineReader
) -> str:
    """Return the model id from the argument, the menu, or the default entry."""
    if arg_value:
        return arg_value
    if terminal.interactive:
        return pick_from_menu(kind, terminal)
    return recommended(kind).id


def validate_model(model_id: str, kind: ModelKind) -> None:
    """Raise UnknownModelError when model_id is not in the catalog."""
    if not is_known(model_id, kind):
        raise UnknownModelError(model_id, kind.value, known_ids(kind))


def ask_yes_no(terminal: LineReader, message: str, default: bool = False) -> bool:
    answer = terminal.read_line(message).lower()
    if not answer:
        return default
    return answer.startswith("y")


def resolve_default_flag(
    explicit_flag: bool, llm_model_id: str, terminal: LineReader
) -> bool:
    if explicit_flag:
        return True
    if terminal.interactive:
        print()
        return ask_yes_no(terminal, render_default_question(llm_model_id))
    return False


def resolve_request(args: CliArgs, terminal: LineReader) -> SetupRequest:
    """Build the validated request for this run.

    Raises:
        MissingCredentialError: If no API key is available
        UnknownModelError: If a model id is not in the catalog
    """
    api_key = resolve_api_key(args.api_key, terminal)
    llm_model_id = resolve_model_choice(args.llm_model, ModelKind.LLM, terminal)
    audio_model_id = resolve_model_choice(args.audio_model, ModelKind.AUDIO, terminal)

    validate_model(llm_model_id, ModelKind.LLM)
    validate_model(audio_model_id, ModelKind.AUDIO)

    set_as_default = resolve_default_flag(args.set_default, llm_model_id, terminal)

    return SetupRequest(
        api_key=api_key,
        llm_model_id=llm_model_id,
        audio_model_id=audio_model_id,
        set_as_default=set_as_default,
    )
