import re
from typing import Optional


class ISBNValidator:
    """ISBN-10 / ISBN-13 validator used when adding books from the CLI."""

    @staticmethod
    def normalize_isbn(raw: str) -> str:
        if raw is None:
            return ""
        s = re.sub(r"[^0-9Xx]", "", raw)
        return s.upper()

    @staticmethod
    def is_valid_isbn(isbn: str) -> bool:
        if not isbn:
            return False
        s = ISBNValidator.normalize_isbn(isbn)
        if len(s) == 10:
            # ISBN-10: weighted 10..1 checksum, 'X' only as check digit
            total = 0
            for i, ch in enumerate(s[:-1]):
                if not ch.isdigit():
                    return False
                total += (10 - i) * int(ch)
            check = s[-1]
            if check == 'X':
                check_val = 10
            elif check.isdigit():
                check_val = int(check)
            else:
                return False
            return (total + check_val) % 11 == 0
        elif len(s) == 13 and s.isdigit():
            # ISBN-13 checksum
            total = 0
            for i, ch in enumerate(s[:-1]):
                factor = 1 if i % 2 == 0 else 3
                total += factor * int(ch)
            check_val = (10 - (total % 10)) % 10
            return check_val == int(s[-1])
        return False


class TextValidator:
    """Basic checks for free-text fields collected at the prompt."""

    @staticmethod
    def _is_non_empty(text: Optional[str]) -> bool:
        return text is not None and bool(text.strip())

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return TextValidator._is_non_empty(title)

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        # must not be digits only
        if not TextValidator._is_non_empty(author):
            return False
        return not author.strip().isdigit()

    @staticmethod
    def validate_genre(genre: Optional[str]) -> bool:
        return TextValidator._is_non_empty(genre)

    @staticmethod
    def validate_borrower(name: Optional[str]) -> bool:
        if not TextValidator._is_non_empty(name):
            return False
        return any(c.isalpha() for c in name)
