"""
SEO Page for pagewright

Collects the title, meta tags and html attributes of the page being served,
and renders them as escaped HTML for the document head.
"""
from __future__ import annotations
from html import escape
from typing import Dict, Optional


class SeoPage:
    """
    Metadata sink for a single request.

    Metas are grouped by kind (the attribute naming the tag, e.g. "name"
    or "property"), then keyed by name:

        {"name": {"description": ("...", {})}, "property": {"og:type": ("article", {})}}
    """

    def __init__(self, title: str = "", separator: str = " - "):
        self.title = title
        self.separator = separator
        self.metas: Dict[str, Dict[str, tuple]] = {
            "http-equiv": {},
            "name": {},
            "schema": {},
            "charset": {},
            "property": {},
        }
        self.html_attributes: Dict[str, str] = {}
        self.link_canonical: Optional[str] = None

    def set_title(self, title: str) -> "SeoPage":
        self.title = title
        return self

    def add_title(self, title: str) -> "SeoPage":
        """Prepend a title segment to the current title."""
        self.title = title + self.separator + self.title if self.title else title
        return self

    def get_title(self) -> str:
        return self.title

    def add_meta(self, kind: str, name: str, value: str, extras: Optional[dict] = None) -> "SeoPage":
        self.metas.setdefault(kind, {})[name] = (value, extras or {})
        return self

    def has_meta(self, kind: str, name: str) -> bool:
        return name in self.metas.get(kind, {})

    def remove_meta(self, kind: str, name: str) -> "SeoPage":
        self.metas.get(kind, {}).pop(name, None)
        return self

    def get_metas(self) -> Dict[str, Dict[str, tuple]]:
        return self.metas

    def add_html_attributes(self, name: str, value: str) -> "SeoPage":
        self.html_attributes[name] = value
        return self

    def get_html_attributes(self) -> Dict[str, str]:
        return self.html_attributes

    def set_link_canonical(self, url: Optional[str]) -> "SeoPage":
        self.link_canonical = url
        return self

    def get_link_canonical(self) -> Optional[str]:
        return self.link_canonical

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render_title(self) -> str:
        return f"<title>{escape(self.title)}</title>"

    def render_metadatas(self) -> str:
        """Render every meta tag, one per line."""
        lines = []
        for kind, metas in self.metas.items():
            for name, (value, extras) in metas.items():
                if kind == "charset":
                    lines.append(f'<meta charset="{escape(name)}" />')
                    continue
                extra = "".join(
                    f' {escape(key)}="{escape(str(val))}"' for key, val in extras.items()
                )
                lines.append(
                    f'<meta {escape(kind)}="{escape(name)}" content="{escape(value)}"{extra} />'
                )
        return "\n".join(lines)

    def render_html_attributes(self) -> str:
        return " ".join(
            f'{escape(name)}="{escape(value)}"' for name, value in self.html_attributes.items()
        )

    def render_link_canonical(self) -> str:
        if not self.link_canonical:
            return ""
        return f'<link rel="canonical" href="{escape(self.link_canonical)}" />'
