"""Stream a large document to disk without holding it in memory.

Each row is written as soon as it is closed; memory use stays flat no
matter how many rows are produced.
"""

import sys
import tempfile
from pathlib import Path

from xmlbuilder import Builder, EncodedSink
from xmlbuilder.profiling import profiled_build

ROWS = int(sys.argv[1]) if len(sys.argv) > 1 else 100_000

path = Path(tempfile.gettempdir()) / "rows.xml"
with profiled_build() as metrics, path.open("wb") as fh:
    xml = Builder(EncodedSink(fh, "ascii"))
    xml.instruct_xml()
    xml.element("rows", "count", ROWS)
    for i in range(ROWS):
        xml.element("row", "id", i)
        xml.tag("label", f"row №{i}")
        xml.tag("value", i * i)
        xml.end()
    xml.end()

print(f"wrote {path} ({path.stat().st_size:,} bytes)")
print(metrics.summary())
