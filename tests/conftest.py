"""
Shared test doubles.

FakePage mimics the small part of the Playwright sync Page that the
scraper touches: goto(), query_selector() and element.inner_text().
"""

from __future__ import annotations

import pytest
from playwright.sync_api import Error as PlaywrightError

from companies import CompanyRef


class FakeElement:
    def __init__(self, text: str) -> None:
        self._text = text

    def inner_text(self) -> str:
        return self._text


class FakePage:
    """
    snapshots -> list of {selector: text}; navigation N serves snapshots[N-1],
                 the last snapshot repeats once the list runs out.
    default   -> text for selectors absent from the snapshot (None = no element).
    fail_on   -> 1-based navigation numbers whose goto() raises a Playwright error.
    """

    def __init__(self, snapshots=None, default=None, fail_on=()) -> None:
        self.snapshots = list(snapshots or [{}])
        self.default = default
        self.fail_on = set(fail_on)
        self.visited: list[str] = []
        self.queries: list[str] = []
        self.url = "about:blank"

    @property
    def navigations(self) -> int:
        return len(self.visited)

    def goto(self, url: str) -> None:
        self.visited.append(url)
        if self.navigations in self.fail_on:
            raise PlaywrightError(f"net::ERR_CONNECTION_RESET at {url}")
        self.url = url

    def query_selector(self, selector: str):
        self.queries.append(selector)
        snapshot = self.snapshots[min(self.navigations, len(self.snapshots)) - 1]
        text = snapshot.get(selector, self.default)
        if text is None:
            return None
        return FakeElement(text)


@pytest.fixture()
def company() -> CompanyRef:
    return CompanyRef(name="Voltas", url="https://www.screener.in/company/VOLTAS")


@pytest.fixture()
def make_page():
    """Factory fixture so tests build pages with their own snapshots."""
    return FakePage
