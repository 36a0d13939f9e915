"""HTTP verb vocabulary and operation-name classification.

An operation is routable when its name begins with one of the verb
tokens. Tokens are checked in a fixed priority order and the first
match wins::

    classify("getUsers")    -> HttpVerb.GET
    classify("postIndex")   -> HttpVerb.POST
    classify("showReport")  -> None
"""

from enum import StrEnum


class HttpVerb(StrEnum):
    """The closed set of verbs a route can be registered under.

    ``ANY`` matches every request method.
    """

    ANY = "any"
    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"

    @property
    def methods(self) -> frozenset[str]:
        """Request methods this verb accepts (uppercase)."""
        if self is HttpVerb.ANY:
            return frozenset(v.value.upper() for v in HttpVerb if v is not HttpVerb.ANY)
        return frozenset({self.value.upper()})


# Priority order: checked first to last, first match wins.
VERB_ORDER: tuple[HttpVerb, ...] = (
    HttpVerb.ANY,
    HttpVerb.GET,
    HttpVerb.POST,
    HttpVerb.PUT,
    HttpVerb.PATCH,
    HttpVerb.DELETE,
)


def _at_boundary(name: str, index: int) -> bool:
    """True if *index* starts a new word in *name* (or is the end)."""
    if index == len(name):
        return True
    char = name[index]
    return char.isupper() or char.isdigit() or char == "_"


def classify(
    name: str,
    verbs: tuple[HttpVerb, ...] = VERB_ORDER,
    *,
    boundary: bool = True,
) -> HttpVerb | None:
    """Return the verb *name* implements, or ``None`` if it is not routable.

    Matching is a case-sensitive prefix test. With *boundary* set (the
    default) the prefix must also end at a word boundary, so ``postpone``
    is not read as ``post`` + ``pone`` and ``getusers`` is not routable.
    This is stricter than a plain prefix test; pass ``boundary=False``
    for the plain test, which accepts any name starting with a token.
    """
    for verb in verbs:
        token = verb.value
        if not name.startswith(token):
            continue
        if boundary and not _at_boundary(name, len(token)):
            continue
        return verb
    return None
