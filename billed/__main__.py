from billed.cli.app import main_menu
from billed.logging import configure_logging
from billed.settings import settings


def main() -> None:
    configure_logging()
    if settings.store_backend == "sql":
        from billed.db import initialize_db

        initialize_db()
    main_menu()


if __name__ == "__main__":
    main()
