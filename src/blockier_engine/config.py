"""User-facing engine settings."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

DEFAULT_CHECKBOX_VARIANTS = ' x><!-/?*nliISpcb"0123456789'
DEFAULT_CALLOUT_SUGGESTIONS = (
    "note,abstract,info,todo,tip,success,question,warning,"
    "failure,danger,bug,example,quote"
)

# camelCase names used by persisted plugin data
_ALIASES = {
    "replaceBlocks": "replace_blocks",
    "selectBlockAvoidsPrefixes": "select_block_avoids_prefixes",
    "selectAllAvoidsPrefixes": "select_block_avoids_prefixes",
    "selectAllIfUnchanged": "select_all_if_unchanged",
    "selectFullCodeBlock": "select_full_code_block",
    "showCheckboxSuggestions": "show_checkbox_suggestions",
    "checkboxVariants": "checkbox_variants",
    "showCalloutSuggestions": "show_callout_suggestions",
    "calloutSuggestions": "callout_suggestions",
}


class SettingsError(ValueError):
    """Raised when persisted settings carry a value of the wrong type."""

    def __init__(self, key: str, value: object, expected: type) -> None:
        super().__init__(
            f"Setting '{key}' expects {expected.__name__}, got {type(value).__name__}"
        )
        self.key = key
        self.value = value


@dataclass(frozen=True, slots=True)
class BlockierSettings:
    """Immutable options passed into every command."""

    replace_blocks: bool = True
    select_block_avoids_prefixes: bool = True
    select_all_if_unchanged: bool = True
    select_full_code_block: bool = True
    show_checkbox_suggestions: bool = False
    checkbox_variants: str = DEFAULT_CHECKBOX_VARIANTS
    show_callout_suggestions: bool = False
    callout_suggestions: str = DEFAULT_CALLOUT_SUGGESTIONS

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "BlockierSettings":
        """Overlay persisted values on the defaults; unknown keys are ignored."""

        known = {field.name: field for field in fields(cls)}
        values: dict[str, Any] = {}
        for raw_key, value in (data or {}).items():
            key = _ALIASES.get(raw_key, raw_key)
            field = known.get(key)
            if field is None:
                continue
            expected = bool if field.type in (bool, "bool") else str
            if type(value) is not expected:
                raise SettingsError(raw_key, value, expected)
            values[key] = value
        return cls(**values)

    def replace(self, **changes: Any) -> "BlockierSettings":
        return replace(self, **changes)


__all__ = [
    "BlockierSettings",
    "DEFAULT_CALLOUT_SUGGESTIONS",
    "DEFAULT_CHECKBOX_VARIANTS",
    "SettingsError",
]
