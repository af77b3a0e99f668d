"""Writes a collection to disk in Bruno's file layout.

Layout::

    <output>/bruno.json
    <output>/collection.bru
    <output>/environments/default.bru
    <output>/wp-v2/posts/list-posts.bru
"""

import json
import re
from pathlib import Path

from wp_bruno.bruno.models import Collection, Environment, Folder, RequestItem

COLLECTION_BRU = """auth {
  mode: basic
}

auth:basic {
  username: {{username}}
  password: {{password}}
}
"""


def safe_folder_name(name: str) -> str:
    return re.sub(r"[^a-zA-Z0-9-_]", "-", name)


def safe_file_stem(name: str) -> str:
    stem = re.sub(r"[^a-zA-Z0-9-_\s]", "", name)
    return re.sub(r"\s+", "-", stem).lower()


def _indent(text: str, prefix: str = "  ") -> str:
    return "\n".join(prefix + line if line else line for line in text.splitlines())


def _block(title: str, lines: list[str]) -> str:
    body = "\n".join(f"  {line}" for line in lines)
    return f"{title} {{\n{body}\n}}"


def _entry(name: str, value: str, enabled: bool) -> str:
    prefix = "" if enabled else "~"
    return f"{prefix}{name}: {value}".rstrip()


def request_to_bru(item: RequestItem) -> str:
    """Render one request item as ``.bru`` text."""
    request = item.request
    blocks = [
        _block("meta", [f"name: {item.name}", "type: http", f"seq: {item.seq or 1}"]),
        _block(request.method.lower(), [
            f"url: {request.url}",
            f"body: {request.body.mode}",
            f"auth: {request.auth.mode}",
        ]),
    ]

    query = [p for p in request.params if p.type == "query"]
    if query:
        blocks.append(_block("params:query", [_entry(p.name, p.value, p.enabled) for p in query]))

    path = [p for p in request.params if p.type == "path"]
    if path:
        blocks.append(_block("params:path", [_entry(p.name, p.value, p.enabled) for p in path]))

    if request.headers:
        blocks.append(_block("headers", [_entry(h.name, h.value, h.enabled) for h in request.headers]))

    if request.body.mode == "json" and request.body.json_:
        blocks.append(f"body:json {{\n{_indent(request.body.json_)}\n}}")

    if request.tests:
        blocks.append(f"tests {{\n{_indent(request.tests)}\n}}")

    return "\n\n".join(blocks) + "\n"


def environment_to_bru(environment: Environment) -> str:
    plain = [v for v in environment.variables if not v.secret]
    secret = [v for v in environment.variables if v.secret]

    text = _block("vars", [_entry(v.name, v.value, v.enabled) for v in plain])
    if secret:
        names = "\n".join(f"  {v.name}" for v in secret)
        text += f"\n\nvars:secret [\n{names}\n]"
    return text + "\n"


def _write_items(items: list[Folder | RequestItem], directory: Path) -> None:
    used_stems: set[str] = set()
    for item in items:
        if isinstance(item, Folder):
            folder_path = directory / safe_folder_name(item.name)
            folder_path.mkdir(parents=True, exist_ok=True)
            _write_items(item.items, folder_path)
            continue

        # PUT and PATCH on one route share a name
        stem = safe_file_stem(item.name) or "request"
        candidate, n = stem, 2
        while candidate in used_stems:
            candidate = f"{stem}-{n}"
            n += 1
        used_stems.add(candidate)

        (directory / f"{candidate}.bru").write_text(request_to_bru(item), encoding="utf-8")


def write_collection(collection: Collection, output_dir: Path) -> None:
    """Write a collection into ``output_dir``, which is created if missing."""
    output_dir.mkdir(parents=True, exist_ok=True)

    bruno_json = {
        "version": "1",
        "name": collection.name,
        "type": "collection",
        "ignore": ["node_modules", ".git"],
    }
    (output_dir / "bruno.json").write_text(json.dumps(bruno_json, indent=2), encoding="utf-8")
    (output_dir / "collection.bru").write_text(COLLECTION_BRU, encoding="utf-8")

    env_dir = output_dir / "environments"
    env_dir.mkdir(exist_ok=True)
    for environment in collection.environments:
        file_name = re.sub(r"\s+", "-", environment.name.lower())
        (env_dir / f"{file_name}.bru").write_text(environment_to_bru(environment), encoding="utf-8")

    _write_items(collection.items, output_dir)
