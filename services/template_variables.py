"""
Template variable contract.

A template declares its variables as ``{{name}}`` placeholders in its HTML.
``extract_variables`` reads that contract and ``synthesize_element`` turns one
variable name into the typed, labelled element a page starts out with.
"""
import re
from dataclasses import dataclass

from models.page_element import ElementType

VARIABLE_PATTERN = re.compile(r"\{\{(\w+)\}\}", re.ASCII)

PLACEHOLDER_IMAGE_URL = "https://placehold.co/600x400"
DEFAULT_COLOR = "#3B82F6"
DEFAULT_LINK = "#"

# Checked in order, first match wins: "backgroundLink" is a COLOR.
TYPE_KEYWORDS: tuple[tuple[ElementType, tuple[str, ...]], ...] = (
    (ElementType.IMAGE, ("image", "img", "logo", "photo")),
    (ElementType.COLOR, ("color", "bg", "background")),
    (ElementType.LINK, ("link", "url", "href")),
)


@dataclass(frozen=True)
class ElementDefaults:
    type: ElementType
    default_content: str
    label: str


def extract_variables(html: str | None) -> list[str]:
    """Distinct placeholder names in ``html``, in order of first occurrence."""
    if not html:
        return []
    return list(dict.fromkeys(VARIABLE_PATTERN.findall(html)))


def infer_element_type(variable: str) -> ElementType:
    lowered = variable.lower()
    for element_type, keywords in TYPE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return element_type
    return ElementType.TEXT


def format_label(variable: str) -> str:
    """heroTitle -> "Hero Title", contact_email -> "Contact Email"."""
    spaced = re.sub(r"([A-Z])", r" \1", variable).replace("_", " ").lstrip()
    return " ".join(word[:1].upper() + word[1:].lower() for word in spaced.split(" "))


def default_content_for(element_type: ElementType, label: str) -> str:
    if element_type == ElementType.IMAGE:
        return PLACEHOLDER_IMAGE_URL
    if element_type == ElementType.COLOR:
        return DEFAULT_COLOR
    if element_type == ElementType.LINK:
        return DEFAULT_LINK
    return label


def synthesize_element(variable: str) -> ElementDefaults:
    element_type = infer_element_type(variable)
    label = format_label(variable)
    return ElementDefaults(
        type=element_type,
        default_content=default_content_for(element_type, label),
        label=label,
    )
