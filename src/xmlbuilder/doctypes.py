"""Common document type declarations.

Each constant is the body of a ``<!DOCTYPE ...>`` declaration, ready to be
passed to :meth:`xmlbuilder.Builder.doctype`:

    >>> from xmlbuilder import Builder
    >>> from xmlbuilder.doctypes import DOCTYPE_HTML5
    >>> b = Builder()
    >>> _ = b.doctype(DOCTYPE_HTML5)
    >>> str(b.sink)
    '<!DOCTYPE html>\\n'
"""

DOCTYPE_HTML5 = "html"

DOCTYPE_HTML4_STRICT = (
    'HTML PUBLIC "-//W3C//DTD HTML 4.01//EN" "http://www.w3.org/TR/html4/strict.dtd"'
)
DOCTYPE_HTML4_TRANSITIONAL = (
    'HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" '
    '"http://www.w3.org/TR/html4/loose.dtd"'
)
DOCTYPE_HTML4_FRAMESET = (
    'HTML PUBLIC "-//W3C//DTD HTML 4.01 Frameset//EN" '
    '"http://www.w3.org/TR/html4/frameset.dtd"'
)

DOCTYPE_XHTML1_STRICT = (
    'html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd"'
)
DOCTYPE_XHTML1_TRANSITIONAL = (
    'html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd"'
)
DOCTYPE_XHTML1_FRAMESET = (
    'html PUBLIC "-//W3C//DTD XHTML 1.0 Frameset//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-frameset.dtd"'
)
DOCTYPE_XHTML11 = (
    'html PUBLIC "-//W3C//DTD XHTML 1.1//EN" "http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd"'
)

__all__ = [
    "DOCTYPE_HTML4_FRAMESET",
    "DOCTYPE_HTML4_STRICT",
    "DOCTYPE_HTML4_TRANSITIONAL",
    "DOCTYPE_HTML5",
    "DOCTYPE_XHTML11",
    "DOCTYPE_XHTML1_FRAMESET",
    "DOCTYPE_XHTML1_STRICT",
    "DOCTYPE_XHTML1_TRANSITIONAL",
]
