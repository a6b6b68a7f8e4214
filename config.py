import os
from dataclasses import dataclass
from typing import Dict
from dotenv import load_dotenv

load_dotenv()

DEFAULT_STAFF_ROSTER = "123456:Mike,654321:Ekim,000000:Ghost"


def parse_staff_roster(raw: str) -> Dict[str, str]:
    """Parse ``code:name`` pairs separated by commas into a code -> name mapping.

    Codes are returned as written; checking their format is left to the staff
    directory so that a bad code is reported there as a configuration error.
    """
    roster: Dict[str, str] = {}
    for entry in (raw or "").split(","):
        entry = entry.strip()
        if not entry:
            continue
        code, sep, name = entry.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Malformed staff roster entry: {entry!r} (expected code:name)")
        roster[code.strip()] = name.strip()
    return roster


@dataclass
class Settings:
    # Application Settings
    app_name: str = os.getenv("APP_NAME", "Library Management System")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    # Ledger Settings
    initial_balance: float = float(os.getenv("LIBRARY_INITIAL_BALANCE", "39000.00"))

    # Purchasing Settings
    min_book_cost: int = int(os.getenv("LIBRARY_MIN_BOOK_COST", "10"))
    max_book_cost: int = int(os.getenv("LIBRARY_MAX_BOOK_COST", "100"))

    # Staff Settings
    staff_roster: str = os.getenv("LIBRARY_STAFF_ROSTER", DEFAULT_STAFF_ROSTER)

    # CLI Settings ('plain', 'json' or 'rich')
    cli_output: str = os.getenv("LIB_CLI_OUTPUT", "plain")


settings = Settings()
