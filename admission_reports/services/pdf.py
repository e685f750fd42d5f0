# FILE: admission_reports/services/pdf.py
from __future__ import annotations

import io
import logging
import re
from typing import Optional, Tuple

from admission_reports.core.config import settings

logger = logging.getLogger(__name__)


class PdfRenderError(RuntimeError):
    pass


def _sanitize_for_xhtml2pdf_css(css: str) -> str:
    """
    xhtml2pdf chokes on comments, @page/@media blocks, flex/grid layout etc.
    This leaves only safe rules so fallback PDFs don't crash.
    """
    if not css:
        return ""

    # remove comments
    css = re.sub(r"/\*.*?\*/", "", css, flags=re.S)

    # remove @-blocks, including one level of nested rules (@media)
    prev = None
    while prev != css:
        prev = css
        css = re.sub(r"@[^{}]+{(?:[^{}]*{[^{}]*})*[^{}]*}", "", css)

    # unsupported props
    css = re.sub(r"display\s*:\s*(?:flex|grid|table-row|table-cell|table)\s*;?", "", css, flags=re.I)
    css = re.sub(r"grid-template-columns\s*:[^;}]*;?", "", css, flags=re.I)
    css = re.sub(r"box-shadow\s*:[^;}]*;?", "", css, flags=re.I)
    css = re.sub(r"linear-gradient\([^;}]*\)", "#f8f9fa", css, flags=re.I)

    # tidy braces
    css = re.sub(r"}\s*}", "}", css)
    css = re.sub(r"{\s*{", "{", css)
    css = re.sub(r"^\s*}\s*", "", css)
    return css


def _strip_unsupported_css_in_html_for_xhtml2pdf(html: str) -> str:
    # merge all style blocks -> sanitize -> inject one safe block
    styles = re.findall(r"<style[^>]*>(.*?)</style>", html, flags=re.I | re.S)
    safe = _sanitize_for_xhtml2pdf_css("\n".join(styles))
    html = re.sub(r"<style[^>]*>.*?</style>", "", html, flags=re.I | re.S)
    # charts are drawn client-side only
    html = re.sub(r"<script[^>]*>.*?</script>", "", html, flags=re.I | re.S)
    safe_tag = f"<style>{safe}</style>"
    if re.search(r"<head[^>]*>", html, flags=re.I):
        return re.sub(r"(<head[^>]*>)", lambda m: m.group(1) + safe_tag, html, count=1, flags=re.I)
    return re.sub(r"(<body[^>]*>)", lambda m: "<head>" + safe_tag + "</head>" + m.group(1),
                  html, count=1, flags=re.I)


def _inject_base_href(html: str, base_url: Optional[str]) -> str:
    if not base_url:
        return html
    base = f"<base href='{base_url.rstrip('/')}/'>"
    if re.search(r"<head[^>]*>", html, flags=re.I):
        return re.sub(r"(<head[^>]*>)", lambda m: m.group(1) + base, html, count=1, flags=re.I)
    return f"<!doctype html><head>{base}</head><body>{html}</body>"


def _weasyprint(full_html: str, base_url: str) -> bytes:
    from weasyprint import HTML
    return HTML(string=_inject_base_href(full_html, base_url), base_url=base_url).write_pdf()


def _xhtml2pdf(full_html: str) -> bytes:
    from xhtml2pdf import pisa
    out = io.BytesIO()
    status = pisa.CreatePDF(_strip_unsupported_css_in_html_for_xhtml2pdf(full_html), dest=out)
    if status.err:
        raise PdfRenderError("PDF rendering failed (xhtml2pdf)")
    return out.getvalue()


def generate_pdf(full_html: str,
                 base_url: Optional[str] = None,
                 prefer: Optional[str] = None) -> Tuple[bytes, str]:
    """
    Try WeasyPrint (best). Fallback to xhtml2pdf (sanitized).
    'prefer' (or settings.PDF_RENDERER) can force a path: "weasyprint" or "xhtml2pdf".
    Returns (pdf bytes, engine name).
    """
    base_url = base_url or settings.SITE_URL
    prefer = (prefer or settings.PDF_RENDERER or "").strip().lower() or None

    if prefer == "weasyprint":
        return _weasyprint(full_html, base_url), "weasyprint"

    if prefer != "xhtml2pdf":
        try:
            return _weasyprint(full_html, base_url), "weasyprint"
        except Exception as e:
            logger.warning("WeasyPrint failed, falling back to xhtml2pdf: %s", e)

    return _xhtml2pdf(full_html), "xhtml2pdf"
