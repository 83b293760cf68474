from __future__ import annotations

import re
from dataclasses import replace

from .entries import ImplementorEntry, ItemRef, escape_attr, render_markup
from .index import ListedImplementor

_ABSOLUTE_HREF = re.compile(r"^(?:[a-z+]+:)?//", re.IGNORECASE)


def rebase_href(href: str, root_path: str) -> str:
    """Prefix a relative doc link with the page's root path.

    Absolute links (`https://...`, protocol-relative `//...`) are returned unchanged.
    """

    if not href or not root_path or _ABSOLUTE_HREF.match(href):
        return href
    return root_path + href


def rebase_entry(entry: ImplementorEntry, root_path: str) -> ImplementorEntry:
    if not root_path:
        return entry
    segments = tuple(
        replace(seg, href=rebase_href(seg.href, root_path)) if isinstance(seg, ItemRef) else seg
        for seg in entry.segments
    )
    return replace(entry, segments=segments)


def anchor_id(trait_name: str, n: int) -> str:
    return f"impl-{trait_name}-{int(n)}"


def render_implementor(entry: ImplementorEntry, *, root_path: str = "", anchor: str | None = None) -> str:
    markup = render_markup(rebase_entry(entry, root_path).segments)
    if anchor is None:
        return f'<section class="impl"><h3 class="code-header">{markup}</h3></section>'
    a = escape_attr(anchor)
    return (
        f'<section id="{a}" class="impl">'
        f'<a href="#{a}" class="anchor">§</a>'
        f'<h3 class="code-header">{markup}</h3>'
        "</section>"
    )


def render_implementors_list(
    listed: list[ListedImplementor],
    *,
    trait_name: str,
    root_path: str = "",
    start: int = 0,
) -> dict[str, str]:
    """Render regular and synthetic implementors as two HTML lists.

    Anchors are numbered sequentially across both lists starting at `start`,
    so they continue after impls the page already shows.
    """

    regular: list[str] = []
    synthetic: list[str] = []
    n = start
    for item in listed:
        html = render_implementor(item.entry, root_path=root_path, anchor=anchor_id(trait_name, n))
        n += 1
        (synthetic if item.entry.synthetic else regular).append(html)
    return {
        "implementors": f'<div id="implementors-list">{"".join(regular)}</div>',
        "synthetic": f'<div id="synthetic-implementors-list">{"".join(synthetic)}</div>',
    }


def trait_name_of(trait_path: str) -> str:
    return trait_path.rsplit("::", 1)[-1]
