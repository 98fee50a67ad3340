"""Default placeholder round-trip validation."""

from typing import Any

from minify_html_literals.interfaces.literals import TemplatePart
from minify_html_literals.interfaces.validation import (
    BaseValidation,
    InvalidPlaceholderError,
    PartCountMismatchError,
)


class DefaultValidation(BaseValidation):
    """Rejects empty placeholders and any change in the number of parts."""

    def ensure_placeholder_valid(self, placeholder: Any) -> None:
        if not isinstance(placeholder, str) or not placeholder:
            raise InvalidPlaceholderError(placeholder)

    def ensure_html_parts_valid(
        self, parts: list[TemplatePart], html_parts: list[str]
    ) -> None:
        if len(parts) != len(html_parts):
            raise PartCountMismatchError(expected=len(parts), actual=len(html_parts))


default_validation = DefaultValidation()
