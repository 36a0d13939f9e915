"""Slug compilation — operation name and parameters to a URL fragment.

Examples::

    getUsers()                       -> "users"
    getIndex()                       -> ""
    postUpdate(user: User, force=None) -> "update/{user}/{force?}"
    get_user_profile(id: int)        -> "user-profile/{id}"
"""

import re
from collections.abc import Iterable

from autoroute.descriptors import Operation, Parameter
from autoroute.routing.verbs import HttpVerb

INDEX_SLUG = "index"

# Break before every uppercase letter: "HTMLParser" -> "H-T-M-L-Parser"
_UPPER_BOUNDARY = re.compile(r"(.)(?=[A-Z])")
_NON_SLUG = re.compile(r"[^a-z0-9\s-]")
_SEPARATORS = re.compile(r"[\s-]+")


def slugify(value: str) -> str:
    """Convert a camelCase, PascalCase, or snake_case name to a URL token.

    Every uppercase letter starts a new word, so acronyms split per
    letter (``userID`` -> ``user-i-d``). Underscores are word breaks.
    Words are lowercased and joined with ``-``; characters outside
    ``[a-z0-9-]`` are dropped.
    """
    value = _UPPER_BOUNDARY.sub(r"\1-", value)
    value = value.replace("_", "-").lower()
    value = _NON_SLUG.sub("", value)
    return _SEPARATORS.sub("-", value).strip("-")


def placeholder_name(parameter: Parameter) -> str:
    """Name of the URL placeholder for *parameter*.

    A non-builtin declared type gives its lowercased basename
    (``user: models.User`` -> ``user``); otherwise the lowercased
    parameter name is used.
    """
    if parameter.type_name is not None and not parameter.builtin:
        return (parameter.type_basename or parameter.name).lower()
    return parameter.name.lower()


def placeholder(parameter: Parameter) -> str:
    """``{name}`` for required parameters, ``{name?}`` for ones with a default."""
    suffix = "?" if parameter.has_default else ""
    return f"{{{placeholder_name(parameter)}{suffix}}}"


def compile_slug(
    operation: Operation,
    verb: HttpVerb,
    request_types: Iterable[str] = (),
) -> str:
    """Compile the slug fragment for *operation*, already classified as *verb*.

    Parameters whose declared type is one of *request_types* are
    injected at dispatch time and never appear in the slug. The result
    has no leading slash; joining with the base path happens in
    ``build_route()``.
    """
    excluded = frozenset(request_types)
    slug = slugify(operation.name.removeprefix(verb.value))
    if slug == INDEX_SLUG:
        slug = ""

    for parameter in operation.parameters:
        if parameter.type_name is not None and parameter.type_name in excluded:
            continue
        slug += "/" + placeholder(parameter)

    return slug
