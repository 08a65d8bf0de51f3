from .tree import build_tree, create_tree_view_payload, default_formatter, flatten_tree, generate_tree_view

__all__ = ["build_tree", "create_tree_view_payload", "default_formatter", "flatten_tree", "generate_tree_view"]
