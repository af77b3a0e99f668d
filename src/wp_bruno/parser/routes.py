"""Route pattern helpers and parameter placement rules.

WordPress routes embed PCRE named groups, e.g. ``/wp/v2/posts/(?P<id>[\\d]+)``.
Every named group is a path parameter.
"""

import re

from .base import FieldDefinition

# Start of a named group. The group's end is found by scanning, since
# patterns nest freely, e.g. (?P<id>([^\/:<>\*\?"\|]+(?:\/[^\/:<>\*\?"\|]+)?)[\/\w%-]+)
GROUP_OPEN = re.compile(r"\(\?P<(\w+)>")
NAMESPACE_PREFIX = re.compile(r"^/([^/]+/v\d+)")
RESOURCE_SEGMENT = re.compile(r"^/[^/]+/v\d+/([\w-]+)")

# Routes whose successful response is a list of resources. Placeholders are
# compared structurally, so their names do not matter.
COLLECTION_ENDPOINTS = frozenset({
    "/wp/v2/posts",
    "/wp/v2/pages",
    "/wp/v2/media",
    "/wp/v2/menu-items",
    "/wp/v2/blocks",
    "/wp/v2/templates",
    "/wp/v2/template-parts",
    "/wp/v2/navigation",
    "/wp/v2/font-families",
    "/wp/v2/categories",
    "/wp/v2/tags",
    "/wp/v2/menus",
    "/wp/v2/wp_pattern_category",
    "/wp/v2/users",
    "/wp/v2/comments",
    "/wp/v2/search",
    "/wp/v2/block-types",
    "/wp/v2/themes",
    "/wp/v2/plugins",
    "/wp/v2/sidebars",
    "/wp/v2/widget-types",
    "/wp/v2/widgets",
    "/wp/v2/block-directory/search",
    "/wp/v2/pattern-directory/patterns",
    "/wp/v2/block-patterns/patterns",
    "/wp/v2/block-patterns/categories",
    "/wp/v2/font-collections",
    "/wp/v2/posts/{parent}/revisions",
    "/wp/v2/posts/{id}/autosaves",
    "/wp/v2/pages/{parent}/revisions",
    "/wp/v2/pages/{id}/autosaves",
    "/wp/v2/menu-items/{id}/autosaves",
    "/wp/v2/blocks/{parent}/revisions",
    "/wp/v2/blocks/{id}/autosaves",
    "/wp/v2/templates/{parent}/revisions",
    "/wp/v2/templates/{id}/autosaves",
    "/wp/v2/template-parts/{parent}/revisions",
    "/wp/v2/template-parts/{id}/autosaves",
    "/wp/v2/global-styles/{parent}/revisions",
    "/wp/v2/global-styles/themes/{stylesheet}/variations",
    "/wp/v2/navigation/{parent}/revisions",
    "/wp/v2/navigation/{id}/autosaves",
    "/wp/v2/font-families/{font_family_id}/font-faces",
    "/wp/v2/users/{user_id}/application-passwords",
})

_COLLECTION_SHAPES = frozenset(re.sub(r"\{\w+\}", "{param}", e) for e in COLLECTION_ENDPOINTS)


def _class_end(route: str, i: int) -> int:
    # i points at "["; a leading "]" (or "^]") is a literal member
    i += 1
    if route.startswith("^", i):
        i += 1
    if route.startswith("]", i):
        i += 1
    while i < len(route):
        if route[i] == "\\":
            i += 2
            continue
        if route[i] == "]":
            return i + 1
        i += 1
    return i


def _group_end(route: str, i: int) -> int | None:
    depth = 1
    while i < len(route):
        char = route[i]
        if char == "\\":
            i += 2
            continue
        if char == "[":
            i = _class_end(route, i)
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return None


def named_groups(route: str):
    """Yield ``(start, end, name)`` for each named group, outermost only.

    Escapes and character classes are skipped, so parentheses inside them
    do not count. Scanning stops at an unbalanced group.
    """
    pos = 0
    while True:
        match = GROUP_OPEN.search(route, pos)
        if not match:
            return
        end = _group_end(route, match.end())
        if end is None:
            return
        yield match.start(), end, match.group(1)
        pos = end


def _replace_groups(route: str, repl) -> str:
    parts = []
    pos = 0
    for start, end, name in named_groups(route):
        parts.append(route[pos:start])
        parts.append(repl(name))
        pos = end
    parts.append(route[pos:])
    return "".join(parts)


def has_identifier(route: str) -> bool:
    """Check whether a route addresses a single item (has any named group)."""
    return "(?P<" in route


def extract_path_parameters(route: str) -> list[str]:
    """Return the named capture groups of a route, in order."""
    return [name for _, _, name in named_groups(route)]


def to_url_template(route: str) -> str:
    """Rewrite capture groups into Bruno path variables (``:name``)."""
    return _replace_groups(route, lambda name: f":{name}")


def route_namespace(route: str) -> str | None:
    match = NAMESPACE_PREFIX.match(route)
    return match.group(1) if match else None


def route_resource(route: str, default: str = "resource") -> str:
    match = RESOURCE_SEGMENT.match(route)
    return match.group(1) if match else default


def is_collection_endpoint(route: str) -> bool:
    """Check whether a route returns a list of items rather than one item."""
    return _replace_groups(route, lambda name: "{param}") in _COLLECTION_SHAPES


def classify(method: str, param_name: str, path_params: list[str]) -> str:
    """Decide where a parameter goes: 'path', 'query' or 'body'.

    Placement depends on the method only: GET arguments always go to the
    query string, other methods send them in the body.
    """
    if param_name in path_params:
        return "path"
    if method.upper() == "GET":
        return "query"
    return "body"


def is_required(field: FieldDefinition, is_path_param: bool) -> bool:
    if is_path_param:
        return True
    if isinstance(field.required, bool):
        return field.required
    return False
