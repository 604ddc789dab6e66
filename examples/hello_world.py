"""
datefield — Hello World

Raw values in, dates out.  Ambiguous input is refused, empty input is
null, and everything else formats, shifts and compares against a clock.
"""

from datetime import UTC, datetime

from datefield import DateService, DateSettings, FixedClock, InvalidFormatError

# ─── Whatever your forms and database columns hand you ───

RAW_VALUES = [
    "2003-03-04",
    "04.03.2003",
    1206968400,
    "",
    "0000-00-00 00:00:00",
    "3/16/2003",
]


def main():
    # ──────────────────────────────────────
    #  1. Create the service
    # ──────────────────────────────────────
    clock = FixedClock(datetime(2000, 12, 31, 12, 0, 0, tzinfo=UTC))
    dates = DateService(DateSettings(locale="en_US"), clock)

    # ──────────────────────────────────────
    #  2. Parse and format
    # ──────────────────────────────────────
    for raw in RAW_VALUES:
        try:
            field = dates.create(raw)
        except InvalidFormatError as e:
            print(f"  {raw!r:28} -> rejected: {e}")
            continue
        if field.is_null:
            print(f"  {raw!r:28} -> null")
            continue
        print(f"  {raw!r:28} -> {field.nice():16} {field.rfc3339()}")

    # ──────────────────────────────────────
    #  3. Patterns and ordinals
    # ──────────────────────────────────────
    field = dates.create("2000-10-20")
    print(field.format("EEEE 'the' {o} 'of' MMMM y"))
    print(field.range_string(dates.create("2000-10-27"), use_ordinal=True))

    # ──────────────────────────────────────
    #  4. Relative time against the pinned clock
    # ──────────────────────────────────────
    for raw in ("2000-11-26", "2000-11-12", "2000-10-27", "1990-12-31", "2001-01-01"):
        print(f"  {raw}: {dates.create(raw).ago()}  (significance 1: {dates.create(raw).ago(True, 1)})")

    # ──────────────────────────────────────
    #  5. Arithmetic
    # ──────────────────────────────────────
    start = dates.create("2019-01-31")
    for expression in ("+1 day", "+2 weeks", "+1 month", "-2 years"):
        print(f"  2019-01-31 {expression:>9} -> {start.modify(expression).url_date()}")


if __name__ == "__main__":
    main()
