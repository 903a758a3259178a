"""
Export the image search workflow (encode → infer → parse → accept/reject).

Usage:
  python src/scripts/visualize_graph.py                 # print steps + Mermaid source
  python src/scripts/visualize_graph.py graph.mmd       # write Mermaid source
  python src/scripts/visualize_graph.py graph.png       # render PNG (needs mermaid.ink)
"""
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on sys.path when running as a script
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.car_search.graph import compile_graph


def describe_graph() -> List[str]:
    """One line per edge, e.g. 'parse -> reject (conditional)'."""
    drawable = compile_graph().get_graph()
    lines = []
    for edge in drawable.edges:
        suffix = " (conditional)" if edge.conditional else ""
        lines.append(f"{edge.source} -> {edge.target}{suffix}")
    return lines


def export_graph(output: Optional[str] = None) -> str:
    """Write the graph to `output` (.png renders, anything else gets Mermaid text).

    Returns the Mermaid source.
    """
    drawable = compile_graph().get_graph()
    mermaid = drawable.draw_mermaid()
    if output is None:
        return mermaid
    path = Path(output)
    if path.suffix.lower() == ".png":
        path.write_bytes(drawable.draw_mermaid_png())
    else:
        path.write_text(mermaid, encoding="utf-8")
    print(f" Saved graph visualization to {path}")
    return mermaid


def main(argv: List[str]) -> int:
    print("Workflow edges:")
    for line in describe_graph():
        print(f"  {line}")
    output = argv[0] if argv else None
    mermaid = export_graph(output)
    if output is None:
        print("\nMermaid source (copy into a Mermaid renderer):\n")
        print(mermaid)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
