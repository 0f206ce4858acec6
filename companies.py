from dataclasses import dataclass

BASE_URL = "https://www.screener.in/company/"

# (display name, screener id)
COMPANIES_DATA = [
    ("Voltas", "VOLTAS"),
    ("Blue Star", "BLUESTARCO"),
    ("Crompton", "CROMPTON"),
    ("Orient Electric", "ORIENTELEC"),
    ("Havells", "HAVELLS"),
    ("Symphony", "SYMPHONY"),
    ("Whirlpool", "WHIRLPOOL"),
]


@dataclass(frozen=True)
class CompanyRef:
    name: str
    url: str


def company_url(company_id: str, base_url: str = BASE_URL) -> str:
    return f"{base_url}{company_id}"


def build_companies(data=COMPANIES_DATA, base_url: str = BASE_URL):
    """Turn (name, screener id) pairs into CompanyRef objects, keeping order."""
    return [CompanyRef(name=name, url=company_url(company_id, base_url)) for name, company_id in data]


COMPANIES = build_companies()
