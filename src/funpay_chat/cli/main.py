"""
FunPay chat CLI — `funpay-chat` command.

Commands:
  funpay-chat run      Answer commands in chat (sets up config if missing)
  funpay-chat setup    Build config.json interactively
  funpay-chat check    Init the session and poll once
"""

import asyncio
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from funpay_chat.client import AsyncFunPay
from funpay_chat.config import DEFAULT_CONFIG_FILE, BotConfig, load_config, save_config
from funpay_chat.dispatcher import CommandDispatcher
from funpay_chat.errors import FunPayError
from funpay_chat.models.message import FAILED, FOUND

console = Console()

config_option = click.option(
    "--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_FILE, show_default=True, help="Path to the JSON config file",
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _interactive_setup(path: Path) -> BotConfig:
    golden_key = click.prompt("Golden key", hide_input=True).strip()
    console.print("Add commands. Leave the command empty to finish.")
    commands: dict[str, str] = {}
    while True:
        command = click.prompt("Command (e.g. !help)", default="", show_default=False).strip()
        if not command:
            break
        commands[command] = click.prompt("Response", default="", show_default=False)
    cfg = BotConfig(golden_key=golden_key, commands=commands)
    save_config(cfg, path)
    console.print(f"[dim]Configuration saved to {path}[/dim]")
    return cfg


def _load_or_setup(path: Path) -> BotConfig:
    try:
        if path.exists():
            return load_config(path)
        return _interactive_setup(path)
    except (FunPayError, ValueError, OSError) as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise SystemExit(1)


def _client_for(cfg: BotConfig) -> AsyncFunPay:
    return AsyncFunPay(cfg.golden_key, base_url=cfg.base_url, ignored_author=cfg.ignored_author)


@click.group()
@click.version_option("0.1.0")
def main():
    """FunPay chat auto-responder."""


@main.command("run")
@config_option
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def run_cmd(config_path: Path, verbose: bool):
    """Watch chats and answer configured commands."""
    _setup_logging(verbose)
    cfg = _load_or_setup(config_path)

    async def _run():
        async with _client_for(cfg) as client:
            dispatcher = CommandDispatcher(client, cfg.commands, poll_interval=cfg.poll_interval)
            await dispatcher.run()

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        console.print("[dim]Stopped.[/dim]")
    except FunPayError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1)


@main.command("setup")
@config_option
def setup_cmd(config_path: Path):
    """Create or overwrite the config file interactively."""
    try:
        _interactive_setup(config_path)
    except (ValueError, OSError) as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise SystemExit(1)


@main.command("check")
@config_option
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def check_cmd(config_path: Path, verbose: bool):
    """Initialize the session and run a single poll."""
    _setup_logging(verbose)
    cfg = _load_or_setup(config_path)

    async def _check():
        async with _client_for(cfg) as client:
            with console.status("Initializing session..."):
                await client.init()
            console.print("[green]Session initialized.[/green]")
            return await client.check_chats()

    try:
        result = asyncio.run(_check())
    except FunPayError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise SystemExit(1)

    if result.status == FOUND and result.message is not None:
        msg = result.message
        console.print(f"[cyan]{escape(msg.author)}[/cyan] in chat {msg.chat_id}: {escape(msg.text)}")
    elif result.status == FAILED:
        console.print(f"[yellow]Poll failed: {escape(str(result.error))}[/yellow]")
    else:
        console.print("[dim]No new messages.[/dim]")


if __name__ == "__main__":
    main()
