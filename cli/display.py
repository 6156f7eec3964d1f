"""Rich terminal rendering for sessions, regions and the community directory."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from modules.community.models import DirectoryResult
from modules.navigation.models import AppRegion, REGION_ROUTES
from modules.profiles.models import Language, UserProfile
from modules.session.models import Session, SessionState

console = Console()

STATE_STYLES = {
    SessionState.UNINITIALIZED: "dim",
    SessionState.LOADING: "dim",
    SessionState.UNAUTHENTICATED: "yellow",
    SessionState.NEEDS_VERIFICATION: "magenta",
    SessionState.NEEDS_PROFILE_SETUP: "cyan",
    SessionState.AUTHENTICATED: "green",
}


def format_language(lang: Language) -> str:
    """Format a language for display, e.g. "🇪🇸 Spanish (beginner)"."""
    label = f"{lang.flag} {lang.name}".strip()
    if lang.level:
        label += f" ({lang.level.value})"
    return label


def render_profile(user: UserProfile) -> Panel:
    """Panel with the fields shown on the profile tab."""
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    table.add_row("Name", user.name or "[dim]-[/dim]")
    table.add_row("Email", user.email or "[dim]-[/dim]")
    table.add_row("Native", format_language(user.native_language))
    table.add_row(
        "Learning",
        ", ".join(format_language(lang) for lang in user.learning_languages) or "[dim]-[/dim]",
    )
    location = ", ".join(part for part in (user.city, user.country) if part)
    table.add_row("Location", location or "[dim]-[/dim]")
    if user.age:
        table.add_row("Age", str(user.age))
    if user.bio:
        table.add_row("Bio", user.bio)
    table.add_row("Verified", "[green]yes[/green]" if user.is_verified else "[yellow]no[/yellow]")
    return Panel(table, title=user.name or user.id, border_style="blue")


def print_session(session: Session) -> None:
    """Print the session state and, when present, the cached profile."""
    state = session.state
    style = STATE_STYLES.get(state, "white")
    console.print(f"[bold]Session:[/bold] [{style}]{state.value}[/{style}]")
    if session.verification_email:
        console.print(f"[dim]Verification pending for {session.verification_email}[/dim]")
    if session.user is not None:
        console.print(render_profile(session.user))


def print_region(region: AppRegion) -> None:
    route = REGION_ROUTES.get(region, "")
    console.print(f"[bold]Screen:[/bold] {region.value} [dim]{route}[/dim]")


def _members_table(title: str, members: list[UserProfile]) -> Table:
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Native")
    table.add_column("Learning")
    table.add_column("Location")
    table.add_column("Online", justify="center")

    for member in members:
        table.add_row(
            member.name or member.id,
            format_language(member.native_language),
            ", ".join(format_language(lang) for lang in member.learning_languages),
            ", ".join(part for part in (member.city, member.country) if part),
            "[green]●[/green]" if member.is_online else "[dim]○[/dim]",
        )
    return table


def print_directory(result: DirectoryResult) -> None:
    """Print native-speaker suggestions followed by the member list."""
    if result.native_speakers:
        console.print(_members_table("Native Speakers for You", result.native_speakers))
        console.print()

    if not result.members:
        console.print("[yellow]No users found[/yellow]")
        return
    console.print(_members_table(f"Community ({result.total})", result.members))
