"""Tree views over flat CMS listings.

``build_tree`` links a flat list by id/parent-id; the rendering helpers turn
the result into the box-drawing text an agent can paste into a reply:

    ├─ folder: Root
    │  ├─ folder: Campaigns
    │  └─ folder: Fonts
    └─ folder: Shared

All functions are pure and never mutate their input.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

Node = dict[str, Any]
NodeFormatter = Callable[[Mapping[str, Any]], str]


def _key(value: Any) -> str | None:
    # CMS builds mix 7 and "7" for the same id
    return None if value is None else str(value)


def build_tree(
    flat: Iterable[Mapping[str, Any]],
    id_field: str = "id",
    parent_id_field: str = "parentId",
    *,
    children_field: str = "children",
) -> list[Node]:
    """Nest a flat list into root nodes with ``children`` lists.

    Nodes whose parent id is missing, null, unknown or their own id become
    roots. Siblings keep their input order. Members of a parent cycle are
    promoted to roots at the first member in input order, so no node is lost.

    Example:
        >>> build_tree([{"id": 1, "parentId": None}, {"id": 2, "parentId": 1}])
        [{'id': 1, 'parentId': None, 'children': [{'id': 2, 'parentId': 1, 'children': []}]}]
    """
    nodes = [{**item, children_field: []} for item in flat]
    by_id: dict[str, Node] = {}
    for node in nodes:
        by_id.setdefault(_key(node.get(id_field)), node)  # type: ignore[arg-type]

    roots: list[Node] = []
    parent_of: dict[int, Node] = {}
    for node in nodes:
        parent_key = _key(node.get(parent_id_field))
        parent = by_id.get(parent_key) if parent_key is not None else None
        if parent is None or parent is node:
            roots.append(node)
        else:
            parent[children_field].append(node)
            parent_of[id(node)] = parent

    seen: set[int] = set()

    def visit(node: Node) -> None:
        stack = [node]
        while stack:
            current = stack.pop()
            if id(current) in seen:
                continue
            seen.add(id(current))
            stack.extend(current[children_field])

    for root in roots:
        visit(root)
    for node in nodes:
        if id(node) not in seen:
            siblings = parent_of[id(node)][children_field]
            del siblings[next(i for i, s in enumerate(siblings) if s is node)]
            roots.append(node)
            visit(node)
    return roots


def default_formatter(node: Mapping[str, Any]) -> str:
    """``type: name``, with ``(Ns)`` appended for timed widgets."""
    text = f"{node.get('type')}: {node.get('name')}"
    if node.get("type") == "widget" and node.get("duration") is not None:
        text += f" ({node['duration']}s)"
    return text


def generate_tree_view(
    tree: list[Mapping[str, Any]],
    formatter: NodeFormatter | None = None,
    *,
    indent: str = "",
    children_field: str = "children",
) -> str:
    """Render nested nodes as box-drawing text, one line per node."""
    fmt = formatter or default_formatter
    lines: list[str] = []
    for index, node in enumerate(tree):
        last = index == len(tree) - 1
        lines.append(f"{indent}{'└─ ' if last else '├─ '}{fmt(node)}\n")
        children = node.get(children_field) or []
        if children:
            lines.append(generate_tree_view(
                children, fmt, indent=indent + ("   " if last else "│  "), children_field=children_field,
            ))
    return "".join(lines)


def flatten_tree(
    tree: list[Mapping[str, Any]],
    path_formatter: Callable[[Mapping[str, Any]], str] | None = None,
    *,
    children_field: str = "children",
) -> list[Node]:
    """Depth-first rows of ``id, name, type, depth, isLast, path``."""
    rows: list[Node] = []

    def walk(nodes: list[Mapping[str, Any]], depth: int, prefix: str) -> None:
        for index, node in enumerate(nodes):
            label = path_formatter(node) if path_formatter else str(node.get("name"))
            path = f"{prefix} > {label}" if prefix else label
            row: Node = {
                "id": node.get("id"),
                "name": node.get("name"),
                "type": node.get("type"),
                "depth": depth,
                "isLast": index == len(nodes) - 1,
                "path": path,
            }
            if node.get("duration") is not None:
                row["duration"] = node["duration"]
            rows.append(row)
            walk(node.get(children_field) or [], depth + 1, path)

    walk(tree, 0, "")
    return rows


def create_tree_view_payload(
    items: Any,
    tree: list[Mapping[str, Any]],
    formatter: NodeFormatter | None = None,
) -> dict[str, Any]:
    """Bundle listing, flattened tree and fenced text view for an agent reply."""
    text = generate_tree_view(tree, formatter)
    return {
        "items": items,
        "tree": flatten_tree(tree),
        "treeViewText": f"```text\n{text}```",
    }
