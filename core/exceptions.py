import enum


class ErrorKind(str, enum.Enum):
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"
    ELEMENT_NOT_FOUND = "ELEMENT_NOT_FOUND"
    SLUG_ALREADY_EXISTS = "SLUG_ALREADY_EXISTS"
    ELEMENT_ALREADY_EXISTS = "ELEMENT_ALREADY_EXISTS"
    TEMPLATE_HAS_DEPENDENTS = "TEMPLATE_HAS_DEPENDENTS"


STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.TEMPLATE_NOT_FOUND: 404,
    ErrorKind.CUSTOMER_NOT_FOUND: 404,
    ErrorKind.PAGE_NOT_FOUND: 404,
    ErrorKind.ELEMENT_NOT_FOUND: 404,
    ErrorKind.SLUG_ALREADY_EXISTS: 409,
    ErrorKind.ELEMENT_ALREADY_EXISTS: 409,
    ErrorKind.TEMPLATE_HAS_DEPENDENTS: 409,
}

DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.TEMPLATE_NOT_FOUND: "Template not found",
    ErrorKind.CUSTOMER_NOT_FOUND: "Customer not found",
    ErrorKind.PAGE_NOT_FOUND: "Page not found",
    ErrorKind.ELEMENT_NOT_FOUND: "Page element not found",
    ErrorKind.SLUG_ALREADY_EXISTS: "A page with this slug already exists",
    ErrorKind.ELEMENT_ALREADY_EXISTS: "An element with this key already exists on the page",
    ErrorKind.TEMPLATE_HAS_DEPENDENTS: "Template is still used by one or more pages",
}


class PageforgeError(Exception):
    """Domain error tagged with an ErrorKind; translated to HTTP once, in main.py."""

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]
