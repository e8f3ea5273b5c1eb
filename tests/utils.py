"""Test utilities for the wechatmd test suite."""

from wechatmd.ast import NodeWalker


class _TypeCollector(NodeWalker):
    def __init__(self, node_type):
        self.node_type = node_type
        self.collected = []

    def generic_visit(self, node):
        if isinstance(node, self.node_type):
            self.collected.append(node)
        super().generic_visit(node)


def collect_nodes(root, node_type):
    """Return every node of ``node_type`` under ``root`` in document order."""
    collector = _TypeCollector(node_type)
    root.accept(collector)
    return collector.collected
