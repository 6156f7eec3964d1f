"""
LanChat - terminal client for the language-exchange session.

Drives the session coordinator against Supabase with the session snapshot
kept on disk, so a sign-in survives between invocations. After every
command the screen the mobile app's navigation guard would show is
printed.
"""

import argparse
import asyncio
import getpass
import logging
import sys
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from cli.credentials import TokenCredentialProvider
from cli.display import console, print_directory, print_region, print_session
from modules.accounts.supabase_store import SupabaseAccountStore
from modules.community.models import DirectoryFilter
from modules.community.service import CommunityService
from modules.navigation.guard import InMemoryNavigator, NavigationGuard, resolve_region
from modules.profiles.languages import find_language
from modules.profiles.models import Language, LanguageLevel, ProfileUpdate
from modules.session.exceptions import NoActiveSessionError
from modules.session.service import SessionCoordinator, create_session_coordinator
from shared.config import get_settings
from shared.database import get_supabase_client
from shared.exceptions import LanChatError


def parse_language(value: str, default_level: Optional[LanguageLevel] = None) -> Language:
    """Parse "code" or "code:level" into a catalog language.

    Args:
        value: Language code, optionally followed by a proficiency level
        default_level: Level used when none is given

    Raises:
        argparse.ArgumentTypeError: If the code or level is unknown
    """
    code, _, level_name = value.partition(":")
    level = default_level
    if level_name:
        try:
            level = LanguageLevel(level_name.lower())
        except ValueError:
            raise argparse.ArgumentTypeError(f"Unknown level: {level_name}") from None

    lang = find_language(code, level)
    if lang is None:
        raise argparse.ArgumentTypeError(f"Unknown language: {code}")
    return lang


def build_profile_update(args: argparse.Namespace) -> ProfileUpdate:
    """Collect only the options the user actually passed."""
    changes = {}
    for field in ("name", "bio", "country", "city", "age"):
        value = getattr(args, field)
        if value is not None:
            changes[field] = value
    if args.native is not None:
        changes["native_language"] = parse_language(args.native, LanguageLevel.NATIVE)
    if args.learning is not None:
        changes["learning_languages"] = [
            parse_language(value, LanguageLevel.BEGINNER) for value in args.learning
        ]
    return ProfileUpdate(**changes)


async def run_command(
    args: argparse.Namespace,
    coordinator: SessionCoordinator,
    community: CommunityService,
) -> None:
    """Run one sub-command against an initialized coordinator."""
    command = args.command

    if command == "status":
        pass
    elif command == "login":
        password = args.password or getpass.getpass("Password: ")
        await coordinator.sign_in(args.email, password)
        console.print("[green]Signed in[/green]")
    elif command == "register":
        password = args.password or getpass.getpass("Password: ")
        await coordinator.register(args.email, password, args.name)
        console.print(f"[green]Account created.[/green] Check {args.email} for a verification code.")
    elif command == "google":
        await coordinator.login_with_google()
        console.print("[green]Signed in with Google[/green]")
    elif command == "verify":
        await coordinator.verify_email(args.code)
        console.print("[green]Email verified[/green]")
    elif command == "resend":
        email = await coordinator.resend_verification()
        console.print(f"Verification code resent to {email or '[dim]unknown address[/dim]'}")
    elif command == "update-profile":
        await coordinator.update_profile(build_profile_update(args))
        console.print("[green]Profile updated[/green]")
    elif command == "logout":
        await coordinator.sign_out()
        console.print("[green]Signed out[/green]")
    elif command == "members":
        viewer = coordinator.session.user
        if viewer is None:
            raise NoActiveSessionError()
        result = await community.list_members(
            viewer,
            DirectoryFilter(
                search_query=args.search,
                language_code=args.language,
                online_only=args.online,
            ),
        )
        print_directory(result)
        return

    print_session(coordinator.session)


async def main(args: argparse.Namespace) -> int:
    """Main entry point.

    Returns:
        Process exit code
    """
    settings = get_settings()
    store = SupabaseAccountStore(
        get_supabase_client(), users_table=settings.supabase_users_table
    )
    coordinator = create_session_coordinator(
        credential_provider=TokenCredentialProvider(getattr(args, "id_token", None)),
        account_store=store,
    )
    community = CommunityService(store)

    session = await coordinator.initialize()
    # Start on the restored screen so only real transitions redirect
    navigator = InMemoryNavigator(initial=resolve_region(session))
    detach = NavigationGuard(navigator).attach(coordinator)

    try:
        await run_command(args, coordinator, community)
    except LanChatError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return 1
    finally:
        detach()
        coordinator.close()

    for region in navigator.history:
        console.print(f"[dim]Redirected to {region.value}[/dim]")
    print_region(navigator.current_region)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LanChat terminal client for sign-in, profile and community"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("status", help="Show the current session")

    login = sub.add_parser("login", help="Sign in with email and password")
    login.add_argument("email")
    login.add_argument("--password", help="Password (prompted if omitted)")

    register = sub.add_parser("register", help="Create an email/password account")
    register.add_argument("email")
    register.add_argument("name")
    register.add_argument("--password", help="Password (prompted if omitted)")

    google = sub.add_parser("google", help="Sign in with a Google ID token")
    google.add_argument("--id-token", dest="id_token", help="Google OpenID Connect ID token")

    verify = sub.add_parser("verify", help="Submit the email verification code")
    verify.add_argument("code")

    sub.add_parser("resend", help="Resend the verification code")

    update = sub.add_parser("update-profile", help="Update profile fields")
    update.add_argument("--name")
    update.add_argument("--bio")
    update.add_argument("--country")
    update.add_argument("--city")
    update.add_argument("--age", type=int)
    update.add_argument("--native", help="Native language code, e.g. en")
    update.add_argument(
        "--learning",
        nargs="*",
        metavar="CODE[:LEVEL]",
        help="Learning languages, e.g. es:beginner fr:intermediate",
    )

    sub.add_parser("logout", help="Sign out and clear the local session")

    members = sub.add_parser("members", help="Browse the community directory")
    members.add_argument("--search", default="", help="Match name, country or city")
    members.add_argument("--language", help="Native or learning language code")
    members.add_argument("--online", action="store_true", help="Only members online now")

    return parser


if __name__ == "__main__":
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "update-profile":
        # Validate language options before touching the network
        try:
            build_profile_update(args)
        except (argparse.ArgumentTypeError, PydanticValidationError) as e:
            parser.error(str(e))

    try:
        sys.exit(asyncio.run(main(args)))
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
