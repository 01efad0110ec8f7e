"""CLI entrypoint for the Dwight audio assistant."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Dwight audio assistant")
triggers_app = typer.Typer(help="Sound and speech trigger commands")
records_app = typer.Typer(help="Audio record commands")
models_app = typer.Typer(help="Model commands")
config_app = typer.Typer(help="Configuration commands")


@app.command("chat")
def chat_cmd() -> None:
    """Interactive chat session."""
    commands.chat()


@app.command("ask")
def ask_cmd(
    text: str = typer.Argument(..., help="What to ask Dwight"),
    as_json: bool = typer.Option(False, "--json", help="Print the reply as JSON"),
) -> None:
    """Ask one question and store the exchange."""
    commands.ask(text=text, as_json=as_json)


@app.command("enhanced")
def enhanced_cmd(
    text: str = typer.Argument(..., help="What to ask the language model"),
    documents: list[str] = typer.Option([], "--doc", help="Context document (repeatable)"),
    advanced: bool = typer.Option(False, "--advanced", help="Ground the answer on --doc entries"),
) -> None:
    """Ask the configured language model in persona."""
    commands.enhanced(text=text, documents=documents, advanced=advanced)


@app.command("query")
def query_cmd(
    text: str = typer.Argument(..., help="Prompt sent to the model as is"),
    model_key: str = typer.Option("llama3-8b", "--model", help="Registered model key"),
) -> None:
    """Query one model directly."""
    commands.query(text=text, model_key=model_key)


@app.command("rag")
def rag_cmd(
    text: str = typer.Argument(..., help="Question to answer"),
    documents: list[str] = typer.Option([], "--doc", help="Context document (repeatable)"),
) -> None:
    """Answer a question from context documents."""
    commands.rag(text=text, documents=documents)



@app.command("history")
def history_cmd(limit: int = typer.Option(10, min=1, max=100)) -> None:
    """Show recent conversation history."""
    commands.history(limit=limit)


@app.command("detect")
def detect_cmd(path: Path = typer.Argument(..., help="WAV file to scan")) -> None:
    """Detect loudness and repetitive patterns in a WAV file."""
    commands.detect(path=path)


@app.command("features")
def features_cmd(path: Path = typer.Argument(..., help="WAV file to summarize")) -> None:
    """Summarize amplitude features of a WAV file."""
    commands.features(path=path)


@app.command("inspect-file")
def inspect_file_cmd(path: Path = typer.Argument(..., help="Audio file path")) -> None:
    """Show format notes for an audio file."""
    commands.inspect_file(path=path)


@app.command("transcribe")
def transcribe_cmd(path: Path = typer.Argument(..., help="Audio file path")) -> None:
    """Transcribe an audio file."""
    commands.transcribe(path=path)


@app.command("describe-image")
def describe_image_cmd(path: Path = typer.Argument(..., help="Image file path")) -> None:
    """Describe an image file."""
    commands.describe_image(path=path)


@triggers_app.command("add")
def triggers_add_cmd(
    trigger_type: str = typer.Argument(..., help="sound or speech"),
    value: str = typer.Argument(..., help="Sound label or phrase to watch for"),
) -> None:
    """Add a trigger."""
    commands.triggers_add(trigger_type=trigger_type, value=value)


@triggers_app.command("list")
def triggers_list_cmd() -> None:
    """List active triggers."""
    commands.triggers_list()


@triggers_app.command("disable")
def triggers_disable_cmd(trigger_id: int = typer.Argument(...)) -> None:
    """Deactivate a trigger."""
    commands.triggers_disable(trigger_id=trigger_id)


@records_app.command("add")
def records_add_cmd(
    title: str = typer.Argument(..., help="Record title"),
    path: Path = typer.Argument(..., help="Audio file path"),
    duration: float | None = typer.Option(None, min=0.0, help="Duration in seconds"),
    transcript: str | None = typer.Option(None, help="Transcript text"),
) -> None:
    """Add an audio record."""
    commands.records_add(title=title, path=path, duration=duration, transcript=transcript)


@records_app.command("list")
def records_list_cmd() -> None:
    """List audio records."""
    commands.records_list()


@models_app.command("list")
def models_list_cmd(show_all: bool = typer.Option(False, "--all", help="Include disabled models")) -> None:
    """List models."""
    commands.models_list(show_all=show_all)


@config_app.command("show")
def config_show_cmd() -> None:
    """Show effective configuration."""
    commands.config_show()


app.add_typer(triggers_app, name="triggers")
app.add_typer(records_app, name="records")
app.add_typer(models_app, name="models")
app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
