import asyncio

import questionary
from rich.console import Console

from billed.cli.bill_menu import list_bills_menu, new_bill_menu, show_attachment
from billed.constants import ROUTES_PATH
from billed.models.session import Session, UserType
from billed.services.bills_service import BillsService
from billed.services.new_bill_service import NewBillSubmission
from billed.settings import settings
from billed.store.base import Store
from billed.store.factory import get_store

console = Console()


class Navigator:
    """Holds the route the menu loop should show next."""

    def __init__(self, route: str = ROUTES_PATH["Bills"]) -> None:
        self.route = route

    def __call__(self, route: str) -> None:
        self.route = route


def _build_session() -> Session:
    return Session(type=UserType(settings.user_type), email=settings.user_email)


def run_route(navigator: Navigator, store: Store, session: Session, runner: asyncio.Runner) -> None:
    if navigator.route == ROUTES_PATH["NewBill"]:
        submission = NewBillSubmission(
            store,
            session,
            on_navigate=navigator,
            on_alert=lambda message: console.print(f"[red]{message}[/red]"),
        )
        # Leaving the form without submitting goes back to the list.
        navigator.route = ROUTES_PATH["Bills"]
        new_bill_menu(submission, runner.run)
        return

    bills_service = BillsService(store, session, on_navigate=navigator, on_view_attachment=show_attachment)
    list_bills_menu(bills_service, runner.run)


def main_menu() -> None:
    store = get_store()
    session = _build_session()
    navigator = Navigator()

    console.print()
    console.print("[bold]Billed[/bold]", style="cyan")
    console.print(f"Connecté en tant que {session.email or 'anonyme'} ({session.type.value})")
    console.print()

    with asyncio.Runner() as runner:
        while True:
            choice = questionary.select(
                "Menu principal",
                choices=[
                    "Mes notes de frais",
                    "Nouvelle note de frais",
                    "Quitter",
                ],
            ).ask()

            if choice is None or choice == "Quitter":
                console.print("[bold]À bientôt ![/bold]")
                break
            elif choice == "Mes notes de frais":
                navigator.route = ROUTES_PATH["Bills"]
            elif choice == "Nouvelle note de frais":
                navigator.route = ROUTES_PATH["NewBill"]

            current = None
            while current != navigator.route:
                current = navigator.route
                run_route(navigator, store, session, runner)
