from typing import List, Optional

from apps.variants.constants import get_attribute_label


class OptionValue:
    """
    One selectable value of an attribute.
    `value` is what variants are matched by; `display_value` is optional.
    """

    def __init__(self, value, display_value=None, color_hex=None):
        self.value = value
        self.display_value = display_value or None
        self.color_hex = color_hex or None

    def __repr__(self):
        return f"<OptionValue {self.value!r}>"

    def __eq__(self, other):
        if not isinstance(other, OptionValue):
            return NotImplemented
        return (
            self.value == other.value
            and self.display_value == other.display_value
            and self.color_hex == other.color_hex
        )

    __hash__ = None

    def get_display_value(self):
        return self.display_value or self.value


class AttributeOption:
    """
    One selectable dimension derived from a variant catalog.

    Examples:
        - name="size"  -> values: "S", "M", "L"
        - name="color" -> values: "Red", "Blue"
        - name="material" -> values: "Cotton"
    """

    def __init__(self, name, values=None):
        self.name = name
        self.values: List[OptionValue] = list(values or [])

    def __repr__(self):
        return f"<AttributeOption {self.name}: {self.value_list}>"

    def __eq__(self, other):
        if not isinstance(other, AttributeOption):
            return NotImplemented
        return self.name == other.name and self.values == other.values

    __hash__ = None

    @property
    def label(self):
        """Canonical display label ("Size", "Color", or the raw key)."""
        return get_attribute_label(self.name)

    @property
    def value_list(self) -> List[str]:
        return [option.value for option in self.values]

    def has_value(self, value) -> bool:
        return self.get_value(value) is not None

    def get_value(self, value) -> Optional[OptionValue]:
        for option in self.values:
            if option.value == value:
                return option
        return None
