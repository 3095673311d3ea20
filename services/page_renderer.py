"""
Turns a page (template + elements + overrides) into the HTML document served
at its public slug.
"""
import html as html_lib
import re
from typing import Callable

from models import Page
from services.theme import parse_theme

SubstitutionRule = Callable[[str, str, str], str]


def substitute_mustache(html: str, key: str, value: str) -> str:
    """Replace every ``{{key}}`` token."""
    return html.replace("{{" + key + "}}", value)


def substitute_data_element(html: str, key: str, value: str) -> str:
    """Replace the text content of tags carrying ``data-element="key"``."""
    pattern = re.compile(r'(<[^>]*data-element="' + re.escape(key) + r'"[^>]*>)[^<]*(</[^>]+>)')
    return pattern.sub(lambda match: match.group(1) + value + match.group(2), html)


# Applied per key, in this order
SUBSTITUTION_RULES: tuple[SubstitutionRule, ...] = (
    substitute_mustache,
    substitute_data_element,
)

BODY_TAG_PATTERN = re.compile(r"<body\b([^>]*)>", re.IGNORECASE)
CLASS_ATTRIBUTE_PATTERN = re.compile(r"""\sclass\s*=\s*("[^"]*"|'[^']*'|[^\s>]+)""", re.IGNORECASE)

DOCUMENT_SHELL = """<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
{styles}
</head>
<body class="{body_class}">{body}</body>
</html>
"""

MESSAGE_DOCUMENT = """<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>{title}</title>
</head>
<body style="font-family: sans-serif; display: flex; justify-content: center; align-items: center; height: 100vh; margin: 0;">
<div style="text-align: center;">
<h1>{heading}</h1>
<p>{message}</p>
</div>
</body>
</html>
"""

# Shared by missing and unpublished pages so drafts cannot be detected
NOT_FOUND_HTML = MESSAGE_DOCUMENT.format(
    title="Page not found",
    heading="404",
    message="This page is not available",
)

ERROR_HTML = MESSAGE_DOCUMENT.format(
    title="Error",
    heading="Error",
    message="Something went wrong while loading this page",
)


def substitute_elements(template_html: str, replacements: dict[str, str]) -> str:
    html = template_html
    for key, value in replacements.items():
        for rule in SUBSTITUTION_RULES:
            html = rule(html, key, value)
    return html


def style_blocks(*stylesheets: str) -> str:
    return "".join(f"<style>{css}</style>" for css in stylesheets)


def set_body_class(html: str, body_class: str) -> str:
    """Give the first <body> tag exactly ``class="body_class"``, replacing any existing class list."""
    def replace(match: re.Match) -> str:
        attributes = CLASS_ATTRIBUTE_PATTERN.sub("", match.group(1))
        return f'<body class="{body_class}"{attributes}>'

    return BODY_TAG_PATTERN.sub(replace, html, count=1)


def render_page_html(page: Page) -> str:
    replacements = {element.element_key: element.content for element in page.elements}
    html = substitute_elements(page.template.html_content, replacements)

    theme = parse_theme(page.theme)
    styles = style_blocks(
        page.template.css_content or "",
        page.custom_css or "",
        theme.to_css(),
    )

    if "</head>" not in html:
        return DOCUMENT_SHELL.format(
            title=html_lib.escape(page.name),
            styles=styles,
            body_class=theme.body_class,
            body=html,
        )

    html = html.replace("</head>", f"{styles}</head>", 1)
    return set_body_class(html, theme.body_class)
