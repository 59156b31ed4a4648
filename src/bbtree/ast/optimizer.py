#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/ast/optimizer.py
"""Tree normalization passes.

Every parser output goes through the same three passes before rendering,
whatever the source syntax was:

1. merge adjacent text nodes,
2. prune whitespace-only text and childless containers,
3. backfill ``href``/``src`` of links and images from their only text child.

Each pass mutates the tree in place and is idempotent. Merging must come
before the backfill, which only looks at nodes with exactly one text child.
When pruning removes anything, text runs are merged once more so that no
two text siblings remain adjacent.

Examples
--------
    >>> from bbtree.ast.optimizer import optimize_tree
    >>> tree = optimize_tree(tree)

"""

from __future__ import annotations

import logging
from typing import Optional

from bbtree.ast.nodes import EMPTY_LEAF_KINDS, NodeKind, TreeNode

logger = logging.getLogger(__name__)

# Attribute backfilled from the single text child, per kind
REFERENCE_ATTRIBUTES: dict[NodeKind, str] = {
    NodeKind.LINK: "href",
    NodeKind.IMAGE: "src",
}


class TreeOptimizer:
    """Canonicalize a parsed tree in place.

    Examples
    --------
        >>> optimizer = TreeOptimizer()
        >>> root = optimizer.optimize(root)

    """

    def optimize(self, root: Optional[TreeNode]) -> Optional[TreeNode]:
        """Run all passes in order and return the same root.

        Parameters
        ----------
        root : TreeNode or None
            Tree to normalize. ``None`` is passed through.

        Returns
        -------
        TreeNode or None
            The (mutated) root

        """
        if root is None:
            return None

        merged = self.merge_text_runs(root)
        pruned = self.prune_empty_nodes(root)
        if pruned:
            # Removing a node can leave two text runs side by side
            merged += self.merge_text_runs(root)
        filled = self.backfill_references(root)
        logger.debug("Optimized tree: merged=%d pruned=%d backfilled=%d", merged, pruned, filled)
        return root

    def merge_text_runs(self, node: TreeNode) -> int:
        """Collapse consecutive text children into the first of each run.

        Returns
        -------
        int
            Number of text nodes absorbed

        """
        absorbed = 0
        last_text: Optional[TreeNode] = None
        for child in node.children:
            if child.is_text:
                if last_text is None:
                    last_text = child
                else:
                    last_text.content += child.content
                    node.remove_child(child)
                    absorbed += 1
            else:
                last_text = None
                absorbed += self.merge_text_runs(child)
        return absorbed

    def prune_empty_nodes(self, node: TreeNode) -> int:
        """Remove whitespace-only text and containers left without children.

        Images, horizontal rules and line breaks are kept even when empty.

        Returns
        -------
        int
            Number of nodes removed

        """
        removed = 0
        for child in node.children:
            if child.is_text:
                if not child.content.strip():
                    node.remove_child(child)
                    removed += 1
                continue

            removed += self.prune_empty_nodes(child)
            if child.kind not in EMPTY_LEAF_KINDS and child.is_leaf:
                node.remove_child(child)
                removed += 1
        return removed

    def backfill_references(self, node: TreeNode) -> int:
        """Fill missing link/image targets from a lone text child.

        An image's text child is the URL itself, so it is dropped once
        promoted.

        Returns
        -------
        int
            Number of attributes filled

        """
        filled = 0
        for child in node.children:
            attribute = REFERENCE_ATTRIBUTES.get(child.kind)
            if attribute is not None and not child.has_attribute(attribute):
                only = child.children[0] if len(child.children) == 1 else None
                if only is not None and only.is_text:
                    child.set_attribute(attribute, only.content.strip())
                    if child.kind is NodeKind.IMAGE:
                        child.clear_children()
                    filled += 1
            filled += self.backfill_references(child)
        return filled


def optimize_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Normalize ``root`` in place with a fresh :class:`TreeOptimizer`."""
    return TreeOptimizer().optimize(root)


__all__ = ["REFERENCE_ATTRIBUTES", "TreeOptimizer", "optimize_tree"]
