from billed.models.bill import BillStatus, ExpenseType

ROUTES_PATH = {
    "Login": "/",
    "Bills": "#employee/bills",
    "NewBill": "#employee/bill/new",
    "Dashboard": "#admin/dashboard",
}

# Three-letter abbreviations of the French short month names (janv., févr., ...).
MONTHS_FR = {
    1: "Jan",
    2: "Fév",
    3: "Mar",
    4: "Avr",
    5: "Mai",
    6: "Jui",
    7: "Jui",
    8: "Aoû",
    9: "Sep",
    10: "Oct",
    11: "Nov",
    12: "Déc",
}

STATUS_LABELS = {
    BillStatus.PENDING: "En attente",
    BillStatus.ACCEPTED: "Accepté",
    BillStatus.REFUSED: "Refusé",
}

UNKNOWN_STATUS_LABEL = "Inconnu"

EXPENSE_TYPES = [t.value for t in ExpenseType]

INVALID_ATTACHMENT_MESSAGE = "Please select a valid image file (JPG, JPEG, or PNG)"
