from __future__ import annotations

from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Any, Union

from .errors import ImplementorFormatError


@dataclass(frozen=True)
class ItemRef:
    """A hyperlink to a documented item (trait, struct, enum, ...).

    `kind` is the CSS class rustdoc puts on the anchor and doubles as the item kind.
    `title` is the hover text, e.g. ``trait core::cmp::PartialEq``.
    """

    kind: str
    name: str
    href: str
    title: str = ""

    @property
    def path(self) -> str:
        prefix, _, rest = self.title.partition(" ")
        if rest and prefix == self.kind:
            return rest
        return self.title or self.name


@dataclass(frozen=True)
class Text:
    value: str


Segment = Union[Text, ItemRef]


_TEXT_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\u00a0": "&nbsp;",
}

# Lifetimes (`'a`) are written raw by rustdoc, so quotes only get escaped inside attributes.
_ATTR_ESCAPES = {**_TEXT_ESCAPES, '"': "&quot;"}


def escape_text(value: str) -> str:
    """Escape text the way rustdoc writes it into implementor markup."""
    return "".join(_TEXT_ESCAPES.get(ch, ch) for ch in value)


def escape_attr(value: str) -> str:
    return "".join(_ATTR_ESCAPES.get(ch, ch) for ch in value)


class _MarkupParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.segments: list[Segment] = []
        self._link: dict[str, str] | None = None
        self._link_text: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag != "a":
            raise ImplementorFormatError(f"Unexpected <{tag}> in implementor markup")
        if self._link is not None:
            raise ImplementorFormatError("Nested <a> in implementor markup")
        self._link = {k: v or "" for k, v in attrs}
        self._link_text = []

    def handle_endtag(self, tag: str) -> None:
        if tag != "a" or self._link is None:
            raise ImplementorFormatError(f"Unexpected </{tag}> in implementor markup")
        link = self._link
        self.segments.append(
            ItemRef(
                kind=link.get("class", ""),
                name="".join(self._link_text),
                href=link.get("href", ""),
                title=link.get("title", ""),
            )
        )
        self._link = None

    def handle_data(self, data: str) -> None:
        if self._link is not None:
            self._link_text.append(data)
            return
        if self.segments and isinstance(self.segments[-1], Text):
            self.segments[-1] = Text(self.segments[-1].value + data)
        else:
            self.segments.append(Text(data))


def parse_markup(markup: str) -> tuple[Segment, ...]:
    """Split a rustdoc implementor fragment into text and link segments."""

    parser = _MarkupParser()
    parser.feed(markup)
    parser.close()
    if parser._link is not None:
        raise ImplementorFormatError("Unterminated <a> in implementor markup")
    return tuple(parser.segments)


def render_markup(segments: tuple[Segment, ...] | list[Segment]) -> str:
    out: list[str] = []
    for seg in segments:
        if isinstance(seg, Text):
            out.append(escape_text(seg.value))
            continue
        out.append(
            f'<a class="{escape_attr(seg.kind)}" href="{escape_attr(seg.href)}" '
            f'title="{escape_attr(seg.title)}">{escape_text(seg.name)}</a>'
        )
    return "".join(out)


@dataclass(frozen=True)
class ImplementorEntry:
    """One "type implements trait" statement.

    Notes:
    - `segments` is the full structure; `markup` is derived by rendering it.
    - `synthetic` entries are auto-trait impls; `types` lists the types they cover so
      a page can show each type once.
    """

    segments: tuple[Segment, ...]
    synthetic: bool = False
    types: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_markup(cls, markup: str, *, synthetic: bool = False, types: tuple[str, ...] = ()) -> "ImplementorEntry":
        return cls(segments=parse_markup(markup), synthetic=bool(synthetic), types=tuple(types))

    @classmethod
    def from_wire(cls, value: Any) -> "ImplementorEntry":
        if isinstance(value, str):
            return cls.from_markup(value)
        if isinstance(value, dict):
            text = value.get("text")
            synthetic = value.get("synthetic", False)
            types = value.get("types", [])
        elif isinstance(value, (list, tuple)) and value:
            text = value[0]
            synthetic = value[1] if len(value) > 1 else False
            types = value[2] if len(value) > 2 else []
        else:
            raise ImplementorFormatError(f"Unsupported implementor entry: {value!r}")

        if not isinstance(text, str):
            raise ImplementorFormatError("Implementor entry text must be a string")
        if not isinstance(types, (list, tuple)) or not all(isinstance(t, str) for t in types):
            raise ImplementorFormatError("Implementor entry types must be a list of strings")
        return cls.from_markup(text, synthetic=bool(synthetic), types=tuple(types))

    def to_wire(self) -> list[Any]:
        if self.synthetic:
            return [self.markup, 1, list(self.types)]
        return [self.markup]

    @property
    def markup(self) -> str:
        return render_markup(self.segments)

    @property
    def subject(self) -> str:
        text = "".join(seg.value if isinstance(seg, Text) else seg.name for seg in self.segments)
        return text.replace("\u00a0", " ")

    @property
    def links(self) -> tuple[ItemRef, ...]:
        return tuple(seg for seg in self.segments if isinstance(seg, ItemRef))

    def _split_at_for(self) -> int | None:
        """Index of the text segment holding the ` for ` keyword, outside any generics."""
        depth = 0
        for i, seg in enumerate(self.segments):
            if not isinstance(seg, Text):
                continue
            text = seg.value
            for pos, ch in enumerate(text):
                if ch == "<":
                    depth += 1
                elif ch == ">" and not text.startswith("->", pos - 1 if pos else 0):
                    depth = max(depth - 1, 0)
                elif depth == 0 and text.startswith(" for ", pos):
                    return i
        return None

    def _trait_index(self) -> int | None:
        idx = self._split_at_for()
        if idx is None:
            return None
        for i in range(idx - 1, -1, -1):
            if isinstance(self.segments[i], ItemRef):
                return i
        return None

    @property
    def trait(self) -> ItemRef | None:
        idx = self._trait_index()
        if idx is None:
            return None
        return self.segments[idx]  # type: ignore[return-value]

    @property
    def target(self) -> ItemRef | None:
        idx = self._split_at_for()
        if idx is None:
            return None
        for seg in self.segments[idx + 1 :]:
            if isinstance(seg, ItemRef):
                return seg
        return None

    @property
    def negative(self) -> bool:
        idx = self._trait_index()
        if idx is None or idx == 0:
            return False
        before = self.segments[idx - 1]
        return isinstance(before, Text) and before.value.endswith("!")

    def to_dict(self) -> dict[str, Any]:
        trait = self.trait
        target = self.target
        return {
            "subject": self.subject,
            "trait": item_ref_to_dict(trait) if trait is not None else None,
            "target": item_ref_to_dict(target) if target is not None else None,
            "links": [item_ref_to_dict(link) for link in self.links],
            "synthetic": self.synthetic,
            "negative": self.negative,
            "types": list(self.types),
            "markup": self.markup,
        }


def item_ref_to_dict(ref: ItemRef) -> dict[str, str]:
    return {"kind": ref.kind, "name": ref.name, "href": ref.href, "title": ref.title, "path": ref.path}
