"""Template filters deciding which literals are minified."""

from minify_html_literals.interfaces.literals import Template


def default_should_minify(template: Template) -> bool:
    """Return True for templates whose tag mentions "html" in any case.

    Matches ``html``, ``HTML``, ``getHTML()`` and ``templateHtml()``; untagged
    templates and tags such as ``css`` are left alone.
    """
    return bool(template.tag) and "html" in template.tag.lower()
