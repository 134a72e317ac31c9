from __future__ import annotations


class SuggestionApplyError(ValueError):
    def __init__(self, message: str, *, code: str = "apply_failed", field: str | None = None):
        super().__init__(message)
        self.code = code
        self.field = field


class SuggestionNotApplicableError(SuggestionApplyError):
    """The suggestion is guidance-only and cannot change resume state."""

    def __init__(self, field: str):
        super().__init__(
            f"Suggestion field '{field}' is advisory and cannot be applied.",
            code="not_applicable",
            field=field,
        )


class SuggestionTargetError(SuggestionApplyError):
    """The suggestion points at an entry that does not exist."""

    def __init__(self, field: str, index: int, size: int):
        super().__init__(
            f"Suggestion field '{field}' targets experience #{index} but the resume has {size} entries.",
            code="target_out_of_range",
            field=field,
        )
        self.index = index
        self.size = size
