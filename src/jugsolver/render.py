"""
Search Tree Rendering

Draws a recorded search tree to an image for debugging and teaching.
Nodes are laid out one row per depth; solution path nodes and edges are
highlighted.
"""

from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .tree import SearchTreeNode


# Layout in pixels
NODE_WIDTH = 90
NODE_HEIGHT = 36
H_SPACING = 16
V_SPACING = 40
MARGIN = 20

PATH_COLOR = "#4CAF50"
NODE_COLOR = "#90A4AE"
EDGE_COLOR = "#B0BEC5"
TEXT_COLOR = "#263238"


def format_tree_text(nodes: Sequence[SearchTreeNode]) -> List[str]:
    """
    Format a search tree as indented text lines.

    Children follow their parent in recording order. Solution path nodes
    are marked "*", others "-".

    Args:
        nodes: Recorded tree nodes

    Returns:
        One line per node
    """
    keys = {node.key for node in nodes}
    children: Dict[str, List[SearchTreeNode]] = {}
    roots = []
    for node in nodes:
        if node.parent_key is None or node.parent_key not in keys:
            roots.append(node)
        else:
            children.setdefault(node.parent_key, []).append(node)

    lines = []
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        marker = "*" if node.is_path else "-"
        lines.append(
            f"{'  ' * node.depth}{marker} {node.key}  "
            f"g={node.g_cost} h={node.heuristic} f={node.f_cost}"
        )
        stack.extend(reversed(children.get(node.key, [])))
    return lines


def layout_tree(nodes: Sequence[SearchTreeNode]) -> Dict[str, Tuple[int, int]]:
    """
    Compute the top-left pixel position of every node.

    Nodes of equal depth share a row, in recording order.

    Args:
        nodes: Recorded tree nodes

    Returns:
        Mapping of node key to (x, y)
    """
    rows: Dict[int, List[SearchTreeNode]] = {}
    for node in nodes:
        rows.setdefault(node.depth, []).append(node)

    positions = {}
    for depth, row in rows.items():
        y = MARGIN + depth * (NODE_HEIGHT + V_SPACING)
        for i, node in enumerate(row):
            x = MARGIN + i * (NODE_WIDTH + H_SPACING)
            positions[node.key] = (x, y)
    return positions


def render_tree(nodes: Sequence[SearchTreeNode], title: str = "") -> Image.Image:
    """
    Draw a search tree.

    Each node box shows the state and "g+h=f". Edges run from parent
    bottom-center to child top-center.

    Args:
        nodes: Recorded tree nodes (typically SolverResult.tree)
        title: Optional caption drawn at the top left

    Returns:
        RGB PIL Image
    """
    positions = layout_tree(nodes)
    widest = max((x for x, _ in positions.values()), default=MARGIN)
    deepest = max((y for _, y in positions.values()), default=MARGIN)
    top = MARGIN if title else 0

    image = Image.new(
        "RGB",
        (widest + NODE_WIDTH + MARGIN, deepest + NODE_HEIGHT + MARGIN + top),
        "white"
    )
    draw = ImageDraw.Draw(image)

    try:
        font = ImageFont.truetype("arial.ttf", 11)
    except OSError:
        font = ImageFont.load_default()

    if title:
        draw.text((MARGIN, 4), title, fill=TEXT_COLOR, font=font)

    by_key = {node.key: node for node in nodes}

    for node in nodes:
        if node.parent_key is None or node.parent_key not in positions:
            continue
        px, py = positions[node.parent_key]
        cx, cy = positions[node.key]
        on_path = node.is_path and by_key[node.parent_key].is_path
        draw.line(
            [(px + NODE_WIDTH // 2, py + NODE_HEIGHT + top), (cx + NODE_WIDTH // 2, cy + top)],
            fill=PATH_COLOR if on_path else EDGE_COLOR,
            width=3 if on_path else 1
        )

    for node in nodes:
        x, y = positions[node.key]
        y += top
        color = PATH_COLOR if node.is_path else NODE_COLOR
        draw.rectangle([x, y, x + NODE_WIDTH, y + NODE_HEIGHT], outline=color, width=2)
        draw.text((x + 6, y + 4), node.key, fill=TEXT_COLOR, font=font)
        draw.text(
            (x + 6, y + 19),
            f"{node.g_cost}+{node.heuristic}={node.f_cost}",
            fill=TEXT_COLOR,
            font=font
        )

    return image


def save_tree_image(
    nodes: Sequence[SearchTreeNode],
    path: Union[str, Path],
    title: str = ""
) -> Path:
    """
    Render a search tree and save it as PNG.

    Args:
        nodes: Recorded tree nodes
        path: Output file path (parent directories are created)
        title: Optional caption

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_tree(nodes, title).save(path, "PNG")
    return path
