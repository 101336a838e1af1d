"""Example: Generate a month of mock cafe sales.

Writes a CSV shaped like an iiko/Poster export
(Дата | Время | Товар | Количество | Сумма | Категория) that can be fed
to examples/sales_report_example.py.

Peak hours: morning 8-10, lunch 12-14, evening 17-19, with weekend days
getting 20% more transactions.
"""

from datetime import date, timedelta

import numpy as np
import pandas as pd

OUTPUT_FILE = "sales_data_month.csv"

START_DATE = date(2025, 12, 1)  # MODIFY AS NEEDED
DAYS_TO_GENERATE = 31
DAILY_TRANSACTIONS_MIN = 30
DAILY_TRANSACTIONS_MAX = 80

# (name, price, weight)
PRODUCTS = [
    ("Капучино 0.3", 900, 40),
    ("Капучино 0.4", 1200, 30),
    ("Латте 0.3", 950, 35),
    ("Латте 0.4", 1250, 25),
    ("Американо 0.3", 700, 20),
    ("Эспрессо", 500, 15),
    ("Раф Цитрусовый 0.4", 1400, 10),
    ("Круассан с шоколадом", 850, 15),
    ("Круассан классический", 650, 10),
    ("Чизкейк Нью-Йорк", 1100, 8),
]

rng = np.random.default_rng(seed=42)
weights = np.array([w for _, _, w in PRODUCTS], dtype=float)
weights /= weights.sum()


def random_hour() -> int:
    r = rng.random()
    if r < 0.30:
        return int(rng.integers(8, 11))
    if r < 0.60:
        return int(rng.integers(12, 15))
    if r < 0.80:
        return int(rng.integers(17, 20))
    return int(rng.integers(7, 23))


rows = []
for i in range(DAYS_TO_GENERATE):
    day = START_DATE + timedelta(days=i)
    n = int(rng.integers(DAILY_TRANSACTIONS_MIN, DAILY_TRANSACTIONS_MAX + 1))
    if day.weekday() >= 5:
        n = int(n * 1.2)

    for _ in range(n):
        name, price, _ = PRODUCTS[rng.choice(len(PRODUCTS), p=weights)]
        qty = 2 if rng.random() > 0.9 else 1
        rows.append(
            {
                "Дата": day.strftime("%d.%m.%Y"),
                "Время": f"{random_hour():02d}:{int(rng.integers(0, 60)):02d}",
                "Товар": name,
                "Количество": qty,
                "Сумма": price * qty,
                "Категория": "Еда" if ("Круассан" in name or "Чизкейк" in name) else "Напитки",
            }
        )

df = pd.DataFrame(rows)
df.to_csv(OUTPUT_FILE, index=False, encoding="utf-8")
print(f"Generated {len(df)} records to {OUTPUT_FILE}")
