from dataclasses import dataclass
from typing import Optional, Tuple

from playwright.sync_api import sync_playwright

from companies import COMPANIES


# ---------- Field tables ----------

@dataclass(frozen=True)
class FieldSpec:
    """
    One named value on a Screener company page.

    index        -> 1-based row / list position
    column_index -> 1-based cell position counted from the end of the row (optional)
    """
    name: str
    index: int
    column_index: Optional[int] = None


@dataclass(frozen=True)
class ExtractionTask:
    """A CSS selector template plus the ordered fields it is filled in with."""
    name: str
    selector: str
    fields: Tuple[FieldSpec, ...]

    def selector_for(self, spec: FieldSpec) -> str:
        return self.selector.format(index=spec.index, column_index=spec.column_index)

    def field_names(self):
        return [spec.name for spec in self.fields]

    def empty_record(self, company) -> dict:
        return {"company": company.name, **{name: None for name in self.field_names()}}


BASIC_STATS = ExtractionTask(
    name="basic_stats",
    selector="#top-ratios > li:nth-child({index}) .number",
    fields=(
        FieldSpec("marketCap", 1),
        FieldSpec("currentPrice", 2),
        FieldSpec("stockPE", 4),
        FieldSpec("ROCE", 7),
        FieldSpec("ROE", 8),
    ),
)

ITEM_INVENTORY = ExtractionTask(
    name="item_inventory",
    selector="#balance-sheet tbody tr:nth-child({index}) td:last-child",
    fields=(
        FieldSpec("reserves", 2),
        FieldSpec("borrowings", 3),
        FieldSpec("totalLiabilities", 5),
        FieldSpec("fixedAssets", 6),
        FieldSpec("investments", 8),
        FieldSpec("totalAssets", 10),
    ),
)

# Profit & Loss: the newest column is the TTM one, so FY2024 sits 2nd from the end.
BATTLE_YEARS = (2022, 2023, 2024)
BATTLE_METRICS = ("sales", "netProfit", "opm", "eps")
BATTLE_YEAR_COLUMNS = {2022: 4, 2023: 3, 2024: 2}
BATTLE_METRIC_ROWS = {"sales": 1, "netProfit": 10, "opm": 4, "eps": 11}

BATTLE_PERFORMANCE = ExtractionTask(
    name="battle_performance",
    selector="#profit-loss table tbody tr:nth-child({index}) td:nth-last-child({column_index})",
    fields=tuple(
        FieldSpec(f"{metric}{year}", BATTLE_METRIC_ROWS[metric], BATTLE_YEAR_COLUMNS[year])
        for year in BATTLE_YEARS
        for metric in BATTLE_METRICS
    ),
)

TASKS = (BASIC_STATS, ITEM_INVENTORY, BATTLE_PERFORMANCE)


# ---------- DOM helpers ----------

def locate_text(page, selector: str) -> Optional[str]:
    """Return the rendered text of the first element matching selector, or None if nothing matches."""
    element = page.query_selector(selector)
    if not element:
        return None
    return element.inner_text()


# ---------- Extraction ----------

def extract_record(task: ExtractionTask, page, company) -> dict:
    """
    Navigate `page` to the company's Screener URL and read every field of `task`.

    Values are kept exactly as rendered (₹, Cr., %, commas untouched);
    a field whose element is missing comes back as None.
    """
    page.goto(company.url)

    data = {}
    for spec in task.fields:
        data[spec.name] = locate_text(page, task.selector_for(spec))

    print(data)
    return {"company": company.name, **data}


def extract_basic_stats(page, company):
    return extract_record(BASIC_STATS, page, company)


def extract_item_inventory(page, company):
    return extract_record(ITEM_INVENTORY, page, company)


def extract_battle_performance(page, company):
    return extract_record(BATTLE_PERFORMANCE, page, company)


# ---------- Standalone debug harness ----------

if __name__ == "__main__":
    # Quick manual check on the first company
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        try:
            page = browser.new_page()
            for task in TASKS:
                print(f"\n==== {task.name} ====")
                record = extract_record(task, page, COMPANIES[0])
                for k, v in record.items():
                    print(f"{k}: {v}")
        finally:
            browser.close()
