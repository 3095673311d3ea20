from models.customer import Customer
from models.template import Template
from models.page import Page
from models.page_element import PageElement, ElementType
