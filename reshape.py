from screener_scraper import BATTLE_METRICS, BATTLE_YEARS


def remap_battle_stats(battle_stats):
    """
    Wide -> long: one row per (company, year) out of each `sales2022`, `eps2023`, ... record.

    Rows keep the input order, years ascending inside each company.
    Missing values stay None.
    """
    remapped = []

    for stat in battle_stats:
        company_name = stat.get("company")

        for year in BATTLE_YEARS:
            row = {"company": company_name, "year": year}
            for metric in BATTLE_METRICS:
                row[metric] = stat.get(f"{metric}{year}")
            remapped.append(row)

    return remapped
