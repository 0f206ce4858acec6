from playwright.sync_api import Error as PlaywrightError

from screener_scraper import extract_record

MAX_ATTEMPTS = 3


def is_complete(record) -> bool:
    """True when the record exists and every value in it was found on the page."""
    return record is not None and None not in record.values()


def extract_with_retries(task, page, company, retries: int = MAX_ATTEMPTS) -> dict:
    """
    Run `extract_record` for one company until it comes back with no missing
    values, at most `retries` times. Each attempt re-navigates from scratch.

    When every attempt is incomplete the last record is returned as-is, nulls
    included. A Playwright error counts as a failed attempt; if the final
    attempt errored, an all-None record is returned so the company keeps its row.
    """
    if retries < 1:
        raise ValueError(f"retries must be at least 1, got {retries}")

    data = None
    for attempt in range(1, retries + 1):
        try:
            data = extract_record(task, page, company)
        except PlaywrightError as e:
            print(f"⚠ Error while scraping {company.name} ({task.name}): {e}")
            data = None

        if is_complete(data):
            return data

        if attempt < retries:
            print(f"Retrying for {company.name}, attempt {attempt}")

    print(f"Failed to retrieve data for {company.name} after {retries} attempts.")
    if data is None:
        return task.empty_record(company)
    return data
