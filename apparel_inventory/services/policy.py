from typing import Iterable, List, Optional

from apparel_inventory.core.exceptions import ValidationError


# Tag vocabulary offered by the material creation form.
DEFAULT_MATERIAL_TAGS = frozenset(
    {"Blanks", "Bright", "Dark", "Floral Designs", "Neutral"})


class AllowedValues:
    """
    Restricts a string-array field (tags, categories) to a fixed vocabulary.

    With allowed=None every value passes through untouched. Otherwise values
    are matched case-insensitively, rewritten to the vocabulary's casing and
    de-duplicated; anything outside the vocabulary is rejected.
    """

    def __init__(self, allowed: Optional[Iterable[str]] = None, field: str = "tags"):
        self.field = field
        self.allowed = frozenset(allowed) if allowed is not None else None
        self._canonical = (
            {value.lower(): value for value in self.allowed}
            if self.allowed is not None else {}
        )

    @property
    def is_restricted(self) -> bool:
        return self.allowed is not None

    def apply(self, values: List[str]) -> List[str]:
        if self.allowed is None:
            return list(values)

        result: List[str] = []
        rejected: List[str] = []
        for value in values:
            canonical = self._canonical.get(value.strip().lower())
            if canonical is None:
                rejected.append(value)
            elif canonical not in result:
                result.append(canonical)

        if rejected:
            raise ValidationError(
                f"Unknown {self.field}: {', '.join(rejected)}. "
                f"Allowed: {', '.join(sorted(self.allowed))}."
            )
        return result
