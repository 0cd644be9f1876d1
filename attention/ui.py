"""Rich console output for the terminal"""

from rich.console import Console
from rich.panel import Panel
from rich import box


console = Console()


HELP_TEXT = """\
[bold]attention[/bold] <flag> <app_name> \\[app_args...]

[bold]Flags:[/bold]
  [cyan]--track-audio[/cyan]       Track audio to disable power management
  [cyan]--track-fullscreen[/cyan]  Track fullscreen to disable power management

[bold]Environment:[/bold]
  ATTENTION_DISCOVERY_INTERVAL  Seconds between window checks at startup (default 0.2)
  ATTENTION_POLL_INTERVAL       Seconds between checks while monitoring (default 1.0)
  ATTENTION_WINDOW_TIMEOUT      Give up waiting for the window after N seconds (default: never)"""


def print_error(message: str):
    """Print error message"""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_success(message: str):
    """Print success message"""
    console.print(f"[bold green]✓[/bold green] {message}")


def print_info(message: str):
    """Print info message"""
    console.print(f"[cyan]ℹ[/cyan] {message}")


def print_warning(message: str):
    """Print warning message"""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_status(message: str):
    """Print a state transition line"""
    console.print(f"[dim]{message}[/dim]")


def print_help():
    """Print usage help to standard output"""
    console.print(Panel(HELP_TEXT, box=box.ROUNDED, border_style="cyan"))
