"""Text and textarea inputs for dialogs."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class InputType(str, Enum):
    """Kinds of dialog input handled here."""

    TEXT = "text"
    TEXTAREA = "textarea"


class TextInputSubtype(str, Enum):
    """Keyboard hint for a text input."""

    EMAIL = "email"
    NUMBER = "number"
    TEL = "tel"
    URL = "url"


def _plain(value):
    return value.value if isinstance(value, Enum) else value


@dataclass
class TextInputElement:
    """A text or textarea dialog input."""

    type: InputType = InputType.TEXT
    name: str = ""
    label: str = ""
    max_length: int = 0
    min_length: int = 0
    hint: str = ""
    subtype: Union[TextInputSubtype, str] = ""
    value: str = ""

    def to_dict(self):
        out = {"type": _plain(self.type), "name": self.name, "label": self.label}
        if self.max_length:
            out["max_length"] = self.max_length
        if self.min_length:
            out["min_length"] = self.min_length
        if self.hint:
            out["hint"] = self.hint
        out["subtype"] = _plain(self.subtype)
        out["value"] = self.value
        return out


def new_text_input(name, label, text, *args):
    """Build a text input; extra arguments are callables that adjust it."""
    element = TextInputElement(type=InputType.TEXT, name=name, label=label, value=text)
    for option in args:
        option(element)
    return element


def new_text_area_input(name, label, text):
    """Build a textarea input."""
    return TextInputElement(type=InputType.TEXTAREA, name=name, label=label, value=text)