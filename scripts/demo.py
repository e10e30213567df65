import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import h3

from h3viz import CircleOverlay, RenderOptions, show_in_browser

CENTER = "8a1fb46622dffff"


def main() -> None:
    cells = sorted(h3.grid_disk(CENTER, 2))
    lat, lng = h3.cell_to_latlng(CENTER)

    options = RenderOptions(show_cell_index=True, show_edge_length=True)
    circles = [CircleOverlay(lat, lng, 150), CircleOverlay(lat, lng, 300)]

    print(f"Rendering {len(cells)} cells around {CENTER} …")
    path = show_in_browser([cells], options, circles)
    print(f"Saved {path}")


if __name__ == "__main__":
    main()
