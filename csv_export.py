import csv
import os


def write_to_csv(file_name, rows, header):
    """
    Write `rows` (dicts) to `file_name`.

    header is an ordered list of (field id, column title) pairs; it decides which
    fields are written and in what order. Keys not in the header are ignored,
    missing keys and None values become empty cells.
    """
    field_ids = [field_id for field_id, _ in header]

    parent = os.path.dirname(file_name)
    if parent:
        os.makedirs(parent, exist_ok=True)

    rows = list(rows)
    with open(file_name, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=field_ids, extrasaction="ignore", restval="")
        writer.writerow(dict(header))
        writer.writerows(rows)

    print(f"✔ Wrote {len(rows)} rows to {file_name}")
