from html_header.builder import HtmlHeader
from html_header.config import HeaderSettings, load_settings
from html_header.errors import InvalidInput
from html_header.escaping import create_tag
from html_header.groups import DEFAULT_ORDER, Group
from html_header.text import normalize, truncate

__all__ = [
    "__version__",
    "DEFAULT_ORDER",
    "Group",
    "HeaderSettings",
    "HtmlHeader",
    "InvalidInput",
    "create_tag",
    "load_settings",
    "normalize",
    "truncate",
]

__version__ = "0.1.0"
