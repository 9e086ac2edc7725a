from __future__ import annotations

import mimetypes
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

import questionary
from rich.console import Console
from rich.table import Table

from billed.constants import EXPENSE_TYPES
from billed.models.attachment import Attachment, AttachmentView
from billed.services.bills_service import BillsService
from billed.services.new_bill_service import NewBillForm, NewBillSubmission

console = Console()

T = TypeVar("T")
Runner = Callable[[Awaitable[T]], T]


def show_attachment(view: AttachmentView) -> None:
    console.print()
    console.print("[bold]Justificatif[/bold]", style="cyan")
    console.print(f"  {view.file_name or '-'}")
    console.print(f"  Lien: {view.file_url or '-'}")


def _format_amount(amount: int | float | None) -> str:
    if amount is None:
        return "-"
    return f"{amount} €"


def list_bills_menu(bills_service: BillsService, run: Runner) -> None:
    try:
        bills = run(bills_service.get_bills())
    except Exception as exc:
        console.print(f"[red]{exc}[/red]")
        return

    if not bills:
        console.print("[yellow]Aucune note de frais.[/yellow]")
    else:
        table = Table(title="Mes notes de frais")
        table.add_column("Type")
        table.add_column("Nom")
        table.add_column("Date")
        table.add_column("Montant", justify="right")
        table.add_column("Statut", justify="center")
        for bill in bills:
            table.add_row(bill.type, bill.name, bill.date, _format_amount(bill.amount), bill.status)
        console.print(table)

    choices = [f"{i + 1} - {bill.name or bill.file_name}" for i, bill in enumerate(bills)]
    choices += ["Nouvelle note de frais", "Retour"]
    choice = questionary.select("Note de frais", choices=choices).ask()

    if choice is None or choice == "Retour":
        return
    if choice == "Nouvelle note de frais":
        bills_service.handle_click_new_bill()
        return

    index = int(choice.split(" - ", 1)[0]) - 1
    bills_service.handle_click_icon_eye(bills[index])


def _read_attachment(path_text: str) -> Attachment | None:
    path = Path(path_text).expanduser()
    if not path.is_file():
        console.print(f"[red]Fichier introuvable: {path}[/red]")
        return None
    media_type, _ = mimetypes.guess_type(path.name)
    return Attachment(file_name=path.name, media_type=media_type or "", content=path.read_bytes())


def new_bill_menu(submission: NewBillSubmission, run: Runner) -> None:
    console.print()
    console.print("[bold]Envoyer une note de frais[/bold]", style="cyan")

    expense_type = questionary.select("Type de dépense", choices=EXPENSE_TYPES).ask()
    if expense_type is None:
        return
    name = questionary.text("Nom de la dépense (ex: Vol Paris Londres):").ask() or ""
    date = questionary.text("Date (AAAA-MM-JJ):").ask() or ""
    amount = questionary.text("Montant TTC (ex: 348):").ask() or ""
    vat = questionary.text("TVA (ex: 70, optionnel):").ask() or ""
    pct = questionary.text("TVA % (défaut 20):").ask() or ""
    commentary = questionary.text("Commentaire (optionnel):").ask() or ""

    while True:
        path_text = questionary.path("Justificatif (JPG, JPEG ou PNG):").ask()
        if not path_text:
            return
        attachment = _read_attachment(path_text)
        if attachment is None:
            continue
        try:
            if run(submission.handle_change_file(attachment)):
                break
        except Exception as exc:
            console.print(f"[red]Échec de l'envoi du justificatif: {exc}[/red]")
            return

    form = NewBillForm(
        type=expense_type,
        name=name,
        date=date,
        amount=amount,
        vat=vat,
        pct=pct,
        commentary=commentary,
    )
    try:
        bill = run(submission.handle_submit(form))
    except Exception as exc:
        console.print(f"[red]Échec de l'envoi: {exc}[/red]")
        return
    console.print(f"[green]Note de frais envoyée: {bill.name} ({_format_amount(bill.amount)})[/green]")
