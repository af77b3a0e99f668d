"""Endpoint transformer: turns one WordPress route and method into a Bruno request."""

import json
from typing import Any

from wp_bruno.bruno.models import Body, Header, Param, Request, RequestItem
from wp_bruno.generator.example import CONTEXT_ARG, compose_body
from wp_bruno.parser.base import Endpoint, ResourceSchema
from wp_bruno.parser.normalize import describe_constraints, extract_constraints
from wp_bruno.parser.routes import (
    classify,
    extract_path_parameters,
    has_identifier,
    is_collection_endpoint,
    is_required,
    route_resource,
    to_url_template,
)

BODY_METHODS = ("POST", "PUT", "PATCH")

# Opt-in conveniences for list requests, added disabled
LIST_QUERY_PARAMS = (
    ("page", "1", "Current page of the collection"),
    ("per_page", "10", "Maximum number of items to be returned"),
    ("search", "", "Limit results to those matching a string"),
    ("orderby", "date", "Sort collection by object attribute"),
    ("order", "desc", "Order sort attribute ascending or descending"),
    ("_embed", "1", "Include embedded resources in response"),
)


def request_name(method: str, route: str) -> str:
    """Derive a human-readable request name from the method and route shape."""
    resource = route_resource(route)
    has_id = has_identifier(route)
    is_autosave = "autosaves" in route
    is_revision = "revisions" in route

    if method == "GET":
        if is_autosave:
            if "autosaves/(?P<id>" in route:
                return f"Get {resource} autosave by ID"
            return f"List {resource} autosaves"
        if is_revision:
            if "revisions/(?P<id>" in route:
                return f"Get {resource} revision by ID"
            return f"List {resource} revisions"
        if has_id:
            return f"Get {resource} by ID"
        if is_collection_endpoint(route):
            return f"List {resource}"
        return f"Get {resource}"

    if method == "POST":
        if is_autosave:
            return f"Create {resource} autosave"
        if is_revision:
            return f"Create {resource} revision"
        return f"Create {resource}"

    if method in ("PUT", "PATCH"):
        return f"Update {resource}"

    if method == "DELETE":
        if is_autosave:
            return f"Delete {resource} autosave"
        if is_revision:
            return f"Delete {resource} revision"
        return f"Delete {resource}"

    return f"{method} {route}"


def default_tests(method: str, is_list: bool) -> list[str]:
    """Baseline test snippets: the expected status code, plus an array check for lists."""
    status = "201" if method == "POST" else "200"
    tests = [
        f'test("Status code is {status}", function() {{\n'
        f"  expect(res.status).to.equal({status});\n"
        f"}});"
    ]
    if is_list:
        tests.append(
            'test("Response is an array", function() {\n'
            "  expect(res.body).to.be.an('array');\n"
            "});"
        )
    return tests


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ",".join(_stringify(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def transform_endpoint(
    route: str,
    method: str,
    endpoint: Endpoint,
    schema: ResourceSchema | None = None,
) -> RequestItem:
    """Map one (route, method) of a WordPress endpoint to a Bruno request item."""
    method = method.upper()
    args = endpoint.args
    path_params = extract_path_parameters(route)
    has_id = has_identifier(route)

    request = Request(url="{{baseUrl}}" + to_url_template(route), method=method)

    for name in path_params:
        arg = args.get(name)
        request.params.append(Param(
            name=name,
            description=arg.description if arg else "",
            enabled=True,
            type="path",
            required=True,
        ))

    for arg_name, arg in args.items():
        if arg_name == CONTEXT_ARG:
            continue
        if classify(method, arg_name, path_params) != "query":
            continue
        if request.find_param(arg_name, "query"):
            continue

        required = is_required(arg, False)
        request.params.append(Param(
            name=arg_name,
            value=_stringify(arg.default) if arg.has_default else "",
            description=describe_constraints(arg.description, extract_constraints(arg)),
            enabled=required,
            type="query",
            required=required,
        ))

    if method == "GET" and not has_id:
        for name, value, description in LIST_QUERY_PARAMS:
            if request.find_param(name):
                continue
            request.params.append(Param(
                name=name,
                value=value,
                description=description,
                enabled=False,
                type="query",
            ))

    if method in BODY_METHODS:
        request.headers.append(Header(name="Content-Type", value="application/json"))
        body_json = compose_body(args, schema, method, path_params)
        if body_json:
            request.body = Body(mode="json", json=body_json)

    is_list = method == "GET" and not has_id and is_collection_endpoint(route)
    request.tests = "\n\n".join(default_tests(method, is_list))

    return RequestItem(name=request_name(method, route), request=request)
