"""Tag Registry - the closed set of recognised HTML element identifiers.

See https://developer.mozilla.org/en-US/docs/Web/HTML/Element
"""

from enum import Enum

from returns.result import Failure, Result, Success

from ..core import InvalidTagError, get_logger

logger = get_logger(__name__)


class HtmlTag(str, Enum):
    """Recognised element kinds. Members compare equal to their tag string."""

    A = "a"
    ABBR = "abbr"
    ADDRESS = "address"
    AREA = "area"
    ARTICLE = "article"
    ASIDE = "aside"
    AUDIO = "audio"
    B = "b"
    BDI = "bdi"
    BDO = "bdo"
    BLOCKQUOTE = "blockquote"
    BODY = "body"
    BUTTON = "button"
    CANVAS = "canvas"
    CAPTION = "caption"
    CITE = "cite"
    CODE = "code"
    COL = "col"
    COLGROUP = "colgroup"
    DATA = "data"
    DATALIST = "datalist"
    DD = "dd"
    DEL = "del"
    DETAILS = "details"
    DFN = "dfn"
    DIALOG = "dialog"
    DIV = "div"
    DL = "dl"
    DT = "dt"
    EM = "em"
    EMBED = "embed"
    FIELDSET = "fieldset"
    FIGCAPTION = "figcaption"
    FIGURE = "figure"
    FOOTER = "footer"
    FORM = "form"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    HEADER = "header"
    HR = "hr"
    HTML = "html"
    I = "i"
    IFRAME = "iframe"
    IMG = "img"
    INPUT = "input"
    INS = "ins"
    KBD = "kbd"
    LABEL = "label"
    LEGEND = "legend"
    LI = "li"
    LINK = "link"
    MAIN = "main"
    MAP = "map"
    MARK = "mark"
    MENU = "menu"
    META = "meta"
    METER = "meter"
    NAV = "nav"
    NOSCRIPT = "noscript"
    OBJECT = "object"
    OL = "ol"
    OPTGROUP = "optgroup"
    OPTION = "option"
    OUTPUT = "output"
    P = "p"
    PICTURE = "picture"
    PRE = "pre"
    PROGRESS = "progress"
    Q = "q"
    RP = "rp"
    RT = "rt"
    RUBY = "ruby"
    S = "s"
    SAMP = "samp"
    SCRIPT = "script"
    SECTION = "section"
    SELECT = "select"
    SLOT = "slot"
    SMALL = "small"
    SOURCE = "source"
    SPAN = "span"
    STRONG = "strong"
    STYLE = "style"
    SUB = "sub"
    SUMMARY = "summary"
    SUP = "sup"
    TABLE = "table"
    TBODY = "tbody"
    TD = "td"
    TEMPLATE = "template"
    TEXTAREA = "textarea"
    TFOOT = "tfoot"
    TH = "th"
    THEAD = "thead"
    TIME = "time"
    TITLE = "title"
    TR = "tr"
    TRACK = "track"
    U = "u"
    UL = "ul"
    VAR = "var"
    VIDEO = "video"
    WBR = "wbr"


TagIdentifier = HtmlTag

_VALID_TAGS: tuple[str, ...] = tuple(tag.value for tag in HtmlTag)
_BY_VALUE: dict[str, HtmlTag] = {tag.value: tag for tag in HtmlTag}


def valid_tags() -> tuple[str, ...]:
    """All recognised tags, in registry order."""
    return _VALID_TAGS


def is_valid_tag(tag: object) -> bool:
    return isinstance(tag, HtmlTag) or (isinstance(tag, str) and tag in _BY_VALUE)


def validate(tag: object) -> HtmlTag:
    """
    Validate an element identifier.

    Matching is exact and case-sensitive.

    Args:
        tag: Candidate tag string

    Returns:
        The canonical HtmlTag

    Raises:
        InvalidTagError: If tag is not recognised; the message lists every valid tag
    """
    if isinstance(tag, HtmlTag):
        return tag
    if isinstance(tag, str) and tag in _BY_VALUE:
        return _BY_VALUE[tag]

    logger.warning("invalid_tag", tag=tag)
    raise InvalidTagError(tag, _VALID_TAGS)


def check_tag(tag: object) -> Result[HtmlTag, InvalidTagError]:
    """
    Validate an element identifier (Result pattern version).

    Args:
        tag: Candidate tag string

    Returns:
        Success with the canonical HtmlTag, or Failure with the InvalidTagError
    """
    try:
        return Success(validate(tag))
    except InvalidTagError as e:
        return Failure(e)


__all__ = ["HtmlTag", "TagIdentifier", "valid_tags", "is_valid_tag", "validate", "check_tag"]
