import re
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

_DECIMAL_DIGITS = re.compile(r"[0-9]+")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


class BookPayload(BaseModel):
    # Only the wire names are read; ``copies_available`` in a body is ignored.
    title: Any = None
    author: Any = None
    genre: Any = None
    copies_available: Any = Field(None, alias="copiesAvailable")

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_body(cls, body: Any):
        """Build a payload from a decoded request body.

        Anything that is not a JSON object carries no fields.
        """
        if not isinstance(body, dict):
            return cls()
        return cls.model_validate(body)


class BookCreate(BookPayload):
    pass


class BookUpdate(BookPayload):
    """Partial update payload.

    A field counts as present when the client sent it, even as ``null``;
    see ``model_fields_set``. Unset fields are never applied.
    """

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


def parse_book_id(raw: str) -> Optional[int]:
    """Read the leading integer of a path segment, ``None`` if there is none.

    ``"12"`` and ``"12abc"`` both give 12, ``"0x1A"`` gives 26 and
    ``"abc"`` gives ``None``.
    """
    text = raw.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]

    if text[:2] in ("0x", "0X"):
        match, base = _HEX_DIGITS.match(text, 2), 16
    else:
        match, base = _DECIMAL_DIGITS.match(text), 10
    if match is None:
        return None
    return sign * int(match.group(0), base)
