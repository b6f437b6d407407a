from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class NodeKind(Enum):
    """Kinds of node found in a structured build log."""
    BUILD = "build"
    PROJECT = "project"
    TARGET = "target"
    TASK = "task"
    PROPERTY = "property"
    PROPERTY_REUSE = "property_reuse"
    ITEM = "item"
    ITEM_GROUP = "item_group"
    MESSAGE = "message"
    WARNING = "warning"
    ERROR = "error"
    ISSUE = "issue"
    SCHEDULE = "schedule"
    FOLDER = "folder"
    OTHER = "other"

    @staticmethod
    def parse(value: Optional[str]) -> 'NodeKind':
        """Lenient lookup by value or tag name (e.g. 'Task', 'ItemGroup', 'item_group')."""
        if not isinstance(value, str) or not value.strip():
            return NodeKind.OTHER
        key = value.strip()
        normalised = ''.join('_' + c.lower() if c.isupper() else c for c in key).lstrip('_').lower()
        for candidate in (key.lower(), normalised):
            try:
                return NodeKind(candidate)
            except ValueError:
                continue
        return NodeKind.OTHER


@dataclass
class TraceNode:
    """A node of the decoded build trace tree.

    Every node has a kind discriminator and a list of children; only the
    fields meaningful for its kind are populated. Missing timestamps are None.
    """
    kind: NodeKind
    name: str = ''
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    children: List['TraceNode'] = field(default_factory=list)

    def add_child(self, child: 'TraceNode') -> 'TraceNode':
        self.children.append(child)
        return child
