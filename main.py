from playwright.sync_api import sync_playwright
import os

from companies import COMPANIES
from csv_export import write_to_csv
from reshape import remap_battle_stats
from retries import extract_with_retries
from screener_scraper import BASIC_STATS, BATTLE_PERFORMANCE, ITEM_INVENTORY

HEADLESS = True  # Set False to watch the browser
OUTPUT_DIR = os.getcwd()

BASIC_STATS_FILE = "Basic_Pokemon_Stats.csv"
ITEM_INVENTORY_FILE = "Pokemon_Item_Inventory.csv"
BATTLE_PERFORMANCE_FILE = "Battle_Performance_Stats.csv"

BASIC_STATS_HEADER = [
    ("company", "Company"),
    ("marketCap", "Market Cap"),
    ("stockPE", "Stock P/E"),
    ("ROCE", "ROCE"),
    ("currentPrice", "Current Price"),
    ("ROE", "ROE"),
]

ITEM_INVENTORY_HEADER = [
    ("company", "Company"),
    ("reserves", "Reserves"),
    ("borrowings", "Borrowings"),
    ("totalLiabilities", "Total Liabilities"),
    ("fixedAssets", "Fixed Assets"),
    ("investments", "Investments"),
    ("totalAssets", "Total Assets"),
]

BATTLE_PERFORMANCE_HEADER = [
    ("company", "Company"),
    ("year", "Year"),
    ("sales", "Sales"),
    ("netProfit", "Net Profit"),
    ("opm", "OPM"),
    ("eps", "EPS"),
]


def scrape_companies(task, page, companies=COMPANIES):
    """Run one extraction task over every company, one after another, on the same page."""
    records = []
    for company in companies:
        records.append(extract_with_retries(task, page, company))
    return records


def export_all(page, companies=COMPANIES, output_dir=OUTPUT_DIR):
    """
    Scrape the three datasets in order (basic stats -> inventory -> battle
    performance) and write each one to its CSV. Returns {file name: path}.
    """
    written = {}

    # Task 1: Basic Pokémon Power Stats
    print("\n====================")
    print("BASIC POKEMON STATS")
    print("====================\n")
    basic_stats = scrape_companies(BASIC_STATS, page, companies)
    path = os.path.join(output_dir, BASIC_STATS_FILE)
    write_to_csv(path, basic_stats, BASIC_STATS_HEADER)
    written[BASIC_STATS_FILE] = path

    # Task 2: Pokémon Item Inventory
    print("\n====================")
    print("POKEMON ITEM INVENTORY")
    print("====================\n")
    inventory_stats = scrape_companies(ITEM_INVENTORY, page, companies)
    path = os.path.join(output_dir, ITEM_INVENTORY_FILE)
    write_to_csv(path, inventory_stats, ITEM_INVENTORY_HEADER)
    written[ITEM_INVENTORY_FILE] = path

    # Task 3: Pokémon Battle Performance Stats (one row per year)
    print("\n====================")
    print("BATTLE PERFORMANCE STATS")
    print("====================\n")
    battle_stats = scrape_companies(BATTLE_PERFORMANCE, page, companies)
    path = os.path.join(output_dir, BATTLE_PERFORMANCE_FILE)
    write_to_csv(path, remap_battle_stats(battle_stats), BATTLE_PERFORMANCE_HEADER)
    written[BATTLE_PERFORMANCE_FILE] = path

    return written


def run(playwright, headless=HEADLESS, output_dir=OUTPUT_DIR):
    browser = playwright.chromium.launch(headless=headless)
    try:
        # One tab reused for every company and every task
        page = browser.new_page()
        return export_all(page, output_dir=output_dir)
    finally:
        browser.close()


if __name__ == "__main__":
    with sync_playwright() as playwright:
        run(playwright)
