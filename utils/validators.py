import math
import re
from typing import Optional

AUTH_CODE_PATTERN = re.compile(r"^\d{6}$")


class AuthCodeValidator:
    """Librarian authorization codes are exactly six digits."""

    @staticmethod
    def normalize_code(raw: Optional[str]) -> str:
        if raw is None:
            return ""
        return raw.strip()

    @staticmethod
    def is_valid_code(code: Optional[str]) -> bool:
        if not isinstance(code, str):
            return False
        return AUTH_CODE_PATTERN.fullmatch(code) is not None


class NumberParser:
    """Lenient parsing of numbers typed at the prompt."""

    @staticmethod
    def parse_year(raw: Optional[str]) -> int:
        # Unparseable years fall back to 0
        try:
            return int((raw or "").strip())
        except ValueError:
            return 0

    @staticmethod
    def parse_amount(raw: Optional[str]) -> float:
        text = (raw or "").strip().replace(",", "")
        if not text:
            raise ValueError("Invalid amount.")
        try:
            value = float(text)
        except ValueError as e:
            raise ValueError("Invalid amount.") from e
        if not math.isfinite(value):
            raise ValueError("Invalid amount.")
        return value

    @staticmethod
    def parse_menu_choice(raw: Optional[str]) -> Optional[int]:
        text = (raw or "").strip()
        if not text.lstrip("-").isdigit():
            return None
        return int(text)


class TextValidator:
    """Cleanup of free text typed at the prompt."""

    @staticmethod
    def sanitize_text(text: Optional[str]) -> str:
        if text is None:
            return ""
        # strip control characters that would garble the table output
        return re.sub(r"[\x00-\x1f\x7f]", "", text).strip()
