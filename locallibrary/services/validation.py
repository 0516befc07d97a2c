"""Form validation and sanitizing chains.

A chain is an ordered list of steps for one form field. Sanitizers rewrite
the value; validators record an error when they fail. Every step runs even
after a failure, so one field can report several messages.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, List, Mapping, Optional

from locallibrary.utils import escape_markup, is_alphanumeric, parse_iso_date

DEFAULT_MESSAGE = "Invalid value"


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass
class ValidationResult:
    values: dict
    errors: List[FieldError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def messages(self) -> List[str]:
        return [error.message for error in self.errors]


class FieldChain:
    """Builder for the steps applied to a single form field."""

    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        self.message = message
        self._steps = []
        self._optional = False

    # Sanitizers

    def trim(self) -> "FieldChain":
        return self._sanitizer(lambda value: value.strip())

    def escape(self) -> "FieldChain":
        return self._sanitizer(escape_markup)

    def to_date(self) -> "FieldChain":
        return self._sanitizer(parse_iso_date)

    # Validators

    def not_empty(self, message: Optional[str] = None) -> "FieldChain":
        return self._validator(lambda value: bool(value), message)

    def is_alphanumeric(self, message: Optional[str] = None) -> "FieldChain":
        return self._validator(is_alphanumeric, message)

    def is_iso_date(self, message: Optional[str] = None) -> "FieldChain":
        return self._validator(lambda value: parse_iso_date(value) is not None, message)

    def optional(self) -> "FieldChain":
        """Skip the whole chain when the field is missing or empty."""
        self._optional = True
        return self

    def run(self, form: Mapping[str, Any]):
        """Apply the chain to ``form[name]``; return ``(value, errors)``."""
        value = form.get(self.name)
        errors = []

        if self._optional and not value:
            return None, errors

        for kind, func, message in self._steps:
            if kind == "sanitize":
                if value is not None:
                    value = func(value)
            elif value is None or not func(value):
                errors.append(FieldError(self.name, message or self.message or DEFAULT_MESSAGE))

        return value, errors

    def _sanitizer(self, func: Callable[[Any], Any]) -> "FieldChain":
        self._steps.append(("sanitize", func, None))
        return self

    def _validator(self, func: Callable[[Any], bool], message: Optional[str]) -> "FieldChain":
        self._steps.append(("validate", func, message))
        return self


def validate(form: Mapping[str, Any], chains: List[FieldChain]) -> ValidationResult:
    """Run every chain against *form*, collecting sanitized values and errors in order."""
    result = ValidationResult(values={})
    for chain in chains:
        value, errors = chain.run(form)
        result.values[chain.name] = value
        result.errors.extend(errors)
    return result


# BookInstance create: book and imprint are required, status is only escaped.
BOOK_INSTANCE_CREATE_RULES = [
    FieldChain("book", "Book must be specified").trim().not_empty().escape(),
    FieldChain("imprint", "Imprint must be specified").trim().not_empty().escape(),
    FieldChain("status").escape(),
    FieldChain("due_back", "Invalid date").optional().is_iso_date().to_date(),
]

# BookInstance update: only imprint and due_back are checked.
BOOK_INSTANCE_UPDATE_RULES = [
    FieldChain("imprint")
    .trim()
    .not_empty("Imprint must be specified")
    .escape()
    .is_alphanumeric("Imprint has non-alphanumeric characters"),
    FieldChain("due_back", "Invalid date of delivery").optional().is_iso_date().to_date(),
]


@dataclass
class BookInstanceForm:
    """Typed book instance fields taken from a submitted form."""

    book: Optional[str]
    imprint: Optional[str]
    status: Optional[str] = None
    due_back: Optional[date] = None

    @classmethod
    def from_values(cls, values: Mapping[str, Any], raw: Mapping[str, Any]) -> "BookInstanceForm":
        """Build a form from validated *values*, falling back to *raw* input
        for fields the rule set does not cover."""

        def pick(name):
            return values[name] if name in values else raw.get(name)

        due_back = pick("due_back")
        if isinstance(due_back, str):
            due_back = parse_iso_date(due_back)

        return cls(
            book=pick("book"),
            imprint=pick("imprint"),
            status=pick("status"),
            due_back=due_back,
        )
