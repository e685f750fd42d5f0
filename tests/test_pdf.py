"""xhtml2pdf fallback sanitising and renderer selection."""
import pytest

from admission_reports.services import pdf
from admission_reports.services.pdf import (
    _sanitize_for_xhtml2pdf_css,
    _strip_unsupported_css_in_html_for_xhtml2pdf,
    generate_pdf,
)


def test_sanitizer_drops_at_rules_and_comments():
    css = """
    /* comment */
    .a { color: red; display: flex; }
    @media print { .a { color: blue; } }
    @page { size: A4; }
    .b { box-shadow: 0 0 1px #000; background: linear-gradient(135deg, #fff, #000); }
    """
    out = _sanitize_for_xhtml2pdf_css(css)
    assert "comment" not in out
    assert "@media" not in out and "@page" not in out
    assert "display" not in out
    assert "box-shadow" not in out
    assert "linear-gradient" not in out
    assert "color: red" in out


def test_html_gets_single_safe_style_and_no_scripts():
    html = ("<html><head><style>.a{color:red}</style><script src='x.js'></script></head>"
            "<body><style>@page{size:A4}</style><script>alert(1)</script></body></html>")
    out = _strip_unsupported_css_in_html_for_xhtml2pdf(html)
    assert out.count("<style>") == 1
    assert "<script" not in out
    assert ".a{color:red}" in out


def test_falls_back_to_xhtml2pdf(monkeypatch):
    def broken(*args, **kwargs):
        raise OSError("no pango")

    monkeypatch.setattr(pdf, "_weasyprint", broken)
    monkeypatch.setattr(pdf, "_xhtml2pdf", lambda html: b"%PDF-fallback")
    assert generate_pdf("<html></html>") == (b"%PDF-fallback", "xhtml2pdf")


def test_forced_weasyprint_does_not_fall_back(monkeypatch):
    def broken(*args, **kwargs):
        raise OSError("no pango")

    monkeypatch.setattr(pdf, "_weasyprint", broken)
    with pytest.raises(OSError):
        generate_pdf("<html></html>", prefer="weasyprint")


def test_forced_xhtml2pdf_skips_weasyprint(monkeypatch):
    monkeypatch.setattr(pdf, "_weasyprint", lambda *a: pytest.fail("weasyprint should not run"))
    monkeypatch.setattr(pdf, "_xhtml2pdf", lambda html: b"%PDF")
    assert generate_pdf("<html></html>", prefer="xhtml2pdf") == (b"%PDF", "xhtml2pdf")
