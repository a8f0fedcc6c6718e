# -*- coding: utf-8 -*-
"""
id3py.export
============

Human-readable views of a trained tree: indented text, flat rules and
Graphviz.  Everything here goes through the read-only traversals of
:mod:`id3py.tree`; nothing inspects the training data except :func:`summary`.
"""
from __future__ import annotations

from .tree import TreeNode, paths, walk


def export_text(node: TreeNode) -> str:
    """Render the tree as indented text.

    The root split is shown as ``Root: <feature>``, every branch as
    ``<feature> == <value>:`` and every leaf as ``-> <class>``.  A split
    below the root is shown as ``Split: <feature>`` under its branch line.
    Each tree level adds four spaces: two for the branch line and two more
    for the node it leads to.

    Example::

        Root: Outlook
          Outlook == Sunny:
            Split: Humidity
              Humidity == High:
                -> No
    """
    lines: list[str] = []
    _text_lines(node, 0, lines)
    return "\n".join(lines)


def _text_lines(node: TreeNode, level: int, lines: list[str]):
    indent = "  " * level
    if node.is_leaf:
        lines.append(f"{indent}-> {node.prediction}")
        return
    if level == 0:
        lines.append(f"Root: {node.feature}")
    else:
        lines.append(f"{indent}Split: {node.feature}")
    for value, child in node.children.items():
        lines.append(f"{indent}  {node.feature} == {value}:")
        _text_lines(child, level + 2, lines)


def export_rules(node: TreeNode) -> list[str]:
    """One ``"<antecedent> => <class>"`` string per leaf."""
    rules: list[str] = []
    for conditions, leaf in paths(node):
        body = " AND ".join(f"{f} = {v}" for f, v in conditions) if conditions else "<root>"
        rules.append(f"{body} => {leaf.prediction}")
    return rules


def export_graphviz(node: TreeNode, filename: str | None = None, *,
                    format: str = "dot") -> str:
    """
    Export the tree in Graphviz format.

    Parameters
    ----------
    node : TreeNode
        Root of the tree.
    filename : str or None, default=None
        Basename of the output file (the extension is determined by
        ``format``).  If None, the DOT source is returned and nothing is
        written.
    format : str, default="dot"
        Output format.  ``'dot'`` writes the DOT source directly and does not
        call the external ``dot`` command; other formats (``'png'``,
        ``'svg'``...) are rendered, falling back to a ``.dot`` file when the
        Graphviz binary is unavailable.

    Returns
    -------
    str
        Path to the written file, or the DOT source if ``filename`` is None.

    Raises
    ------
    RuntimeError
        If the ``graphviz`` Python package is not installed.
    """
    try:
        import graphviz
    except ImportError:
        raise RuntimeError("Graphviz is required for export_graphviz but not installed.")
    dot = graphviz.Digraph(format=format)
    # walk() is pre-order, so a node's parent is the last node seen one level up
    stack: list[str] = []
    for i, (depth, branch, n) in enumerate(walk(node)):
        name = str(i)
        del stack[depth:]
        if n.is_leaf:
            dot.node(name, f"class={n.prediction}", shape="box", style="filled",
                     color="lightgrey")
        else:
            dot.node(name, n.feature, shape="ellipse", style="filled", color="lightblue")
        if stack:
            dot.edge(stack[-1], name, label=str(branch))
        stack.append(name)

    if filename is None:
        return dot.source
    if format.lower() == "dot":
        path = f"{filename}.dot"
        dot.save(path)
        return path
    try:
        dot.render(filename, cleanup=True)
        return f"{filename}.{format}"
    except graphviz.ExecutableNotFound:
        fallback_path = f"{filename}.dot"
        dot.save(fallback_path)
        return fallback_path


def summary(model) -> str:
    """Dataset information block for a trained :class:`~id3py.model.ID3Model`."""
    dataset = model.dataset
    return "\n".join([
        "Dataset Information:",
        "===================",
        f"Rows: {dataset.n_rows}",
        f"Columns: {dataset.n_columns}",
        "Features: " + " ".join(dataset.headers),
        f"Target: {model.target}",
    ])
