from typing import Iterable, List


class Node:
    def __init__(self, node_id: str, label: str = "", children_ids: Iterable[str] = ()):
        self.node_id = node_id
        self.label = label or node_id
        # Duplicates are kept, order is the visiting order
        self.children_ids: List[str] = list(children_ids)

    def add_child(self, child_id: str) -> None:
        self.children_ids.append(child_id)

    def to_dict(self) -> dict:
        return {
            "id": self.node_id,
            "label": self.label,
            "children": list(self.children_ids),
        }

    def __repr__(self) -> str:
        return f"Node({self.node_id!r}, {self.label!r}, children={self.children_ids!r})"
