# usage_example.py
# Minimal usage example for bincmp/core/comparator.py.
# This file is not part of the bincmp package. For reference only.

import io

from bincmp import ComparisonMode, OutputFormat, compare_streams
from bincmp.core.formatter import TableWriter, header_cells, length_note, row_cells

# Inputs
# 0x0F -> 0x1F at offset 5 is a single bit flip (bit 4).
# 0x00 -> 0xFF at offset 7 differs in all eight bits.
first:  bytes = bytes([0x00, 0x01, 0x02, 0x03, 0x04, 0x0F, 0x06, 0x00])
second: bytes = bytes([0x00, 0x01, 0x02, 0x03, 0x04, 0x1F, 0x06, 0xFF, 0x08])

# Compare
differences, report = compare_streams(
    io.BytesIO(first),
    io.BytesIO(second),
    mode=ComparisonMode.EXACT,
)

# Render
out = io.StringIO()
table = TableWriter(out)
table.write_row(header_cells(OutputFormat.COMBINED))
for diff in differences:
    table.write_row(row_cells(OutputFormat.COMBINED, diff))
table.flush()

print(out.getvalue(), end="")
print(length_note(report.length_relation, "first", "second"))

# Expected output:
#      OFFSET     Hex     FILE1     Hex     FILE2     Hex
#           5       5        15       f        31      1f
#           7       7         0       0       255      ff
# NOTE: The second file (second) is larger than the first file (first).

# With ComparisonMode.SINGLE_BITFLIP only offset 5 would be reported.
