import json

import pytest
from unittest.mock import Mock

from models import Page, PageElement, Template
from services.page_renderer import (
    NOT_FOUND_HTML,
    render_page_html,
    set_body_class,
    substitute_data_element,
    substitute_elements,
    substitute_mustache,
)


def make_page(html, css="", custom_css=None, theme=None, elements=None, name="Spring Sale"):
    template = Mock(spec=Template)
    template.html_content = html
    template.css_content = css

    page = Mock(spec=Page)
    page.name = name
    page.template = template
    page.custom_css = custom_css
    page.theme = theme
    page.elements = []
    for key, content in (elements or {}).items():
        element = Mock(spec=PageElement)
        element.element_key = key
        element.content = content
        page.elements.append(element)
    return page


@pytest.mark.unit
class TestSubstitution:

    def test_mustache_replaces_every_occurrence(self):
        html = "<h1>{{title}}</h1><title>{{title}}</title>"

        assert substitute_mustache(html, "title", "Hi") == "<h1>Hi</h1><title>Hi</title>"

    def test_data_element_replaces_text_content(self):
        html = '<p class="lead" data-element="subtitle">Old text</p><p>keep</p>'

        result = substitute_data_element(html, "subtitle", "New text")

        assert result == '<p class="lead" data-element="subtitle">New text</p><p>keep</p>'

    def test_data_element_value_is_inserted_literally(self):
        html = '<span data-element="price">0</span>'

        assert substitute_data_element(html, "price", r"\1 $1 \g<0>") == r'<span data-element="price">\1 $1 \g<0></span>'

    def test_data_element_does_not_touch_other_keys(self):
        html = '<span data-element="subtitle2">a</span>'

        assert substitute_data_element(html, "subtitle", "b") == html

    def test_both_mechanisms_for_the_same_key(self):
        html = '<h1>{{title}}</h1><h2 data-element="title">placeholder</h2>'

        result = substitute_elements(html, {"title": "Hello"})

        assert result == '<h1>Hello</h1><h2 data-element="title">Hello</h2>'

    def test_placeholders_without_element_are_left_alone(self):
        assert substitute_elements("{{title}} {{missing}}", {"title": "T"}) == "T {{missing}}"


@pytest.mark.unit
class TestSetBodyClass:

    def test_adds_class_attribute(self):
        assert set_body_class('<body id="top">', "dark") == '<body class="dark" id="top">'

    def test_replaces_existing_class_list(self):
        html = '<body class="landing wide" data-x="1">'

        assert set_body_class(html, "dark") == '<body class="dark" data-x="1">'

    def test_only_first_body_tag(self):
        html = "<body><template><body></template>"

        assert set_body_class(html, "") == '<body class=""><template><body></template>'


@pytest.mark.unit
class TestRenderPageHtml:

    def test_fragment_is_wrapped_in_document(self):
        page = make_page(
            "<h1>{{title}}</h1><p>{{description}}</p>",
            css="h1 { color: red; }",
            custom_css="h1 { color: blue; }",
            elements={"title": "Welcome", "description": "Big discounts"},
        )

        html = render_page_html(page)

        assert html.startswith("<!DOCTYPE html>")
        assert '<meta charset="UTF-8">' in html
        assert "<title>Spring Sale</title>" in html
        assert '<body class=""><h1>Welcome</h1><p>Big discounts</p></body>' in html
        assert "{{" not in html

    def test_style_blocks_order(self):
        page = make_page(
            "<p>x</p>",
            css="/* template */",
            custom_css="/* custom */",
            theme=json.dumps({"palette": {"--primary": "#000"}}),
        )

        html = render_page_html(page)

        assert "<style>/* template */</style><style>/* custom */</style><style>:root { --primary: #000; }</style>" in html

    def test_missing_custom_css_and_theme_give_empty_blocks(self):
        html = render_page_html(make_page("<p>x</p>", css="p {}"))

        assert "<style>p {}</style><style></style><style></style>" in html

    def test_dark_theme(self):
        page = make_page("<p>x</p>", theme='{"mode":"dark","palette":{"--primary":"#ff0000"}}')

        html = render_page_html(page)

        assert '<body class="dark">' in html
        assert "--primary: #ff0000;" in html

    def test_malformed_theme_renders_light(self):
        page = make_page("<p>x</p>", theme="{not json")

        html = render_page_html(page)

        assert '<body class="">' in html
        assert ":root" not in html

    def test_full_document_gets_styles_before_head_close(self):
        template_html = (
            "<!DOCTYPE html><html><head><title>{{title}}</title></head>"
            "<body><h1>{{title}}</h1></body></html>"
        )
        page = make_page(template_html, css="h1 {}", theme='{"mode":"dark"}', elements={"title": "Hi"})

        html = render_page_html(page)

        assert html == (
            "<!DOCTYPE html><html><head><title>Hi</title>"
            "<style>h1 {}</style><style></style><style></style></head>"
            '<body class="dark"><h1>Hi</h1></body></html>'
        )

    def test_page_name_is_escaped_in_title(self):
        html = render_page_html(make_page("<p>x</p>", name="Tom & Jerry <3"))

        assert "<title>Tom &amp; Jerry &lt;3</title>" in html

    def test_css_braces_survive(self):
        html = render_page_html(make_page("<p>{{title}}</p>", css="a { b: {c} }", elements={"title": "{x}"}))

        assert "<style>a { b: {c} }</style>" in html
        assert "<p>{x}</p>" in html

    def test_render_is_idempotent(self):
        page = make_page("<h1>{{title}}</h1>", css="h1 {}", elements={"title": "Same"})

        assert render_page_html(page) == render_page_html(page)

    def test_not_found_document_is_complete(self):
        assert NOT_FOUND_HTML.startswith("<!DOCTYPE html>")
        assert "404" in NOT_FOUND_HTML
        assert NOT_FOUND_HTML.rstrip().endswith("</html>")
