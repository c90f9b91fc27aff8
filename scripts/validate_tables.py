#!/usr/bin/env python3
"""Load every packaged table and report how many entries each one holds."""
from __future__ import annotations

import sys
from typing import Optional

from localedata import LocaleData, LocaleDataError, TableKind, init
from localedata.core.config import Settings


def main(settings: Optional[Settings] = None) -> int:
    try:
        init(settings, configure_logging=True)
    except LocaleDataError as e:
        print(f"FAIL {e.message}")
        return 1
    total = 0
    for kind in TableKind:
        for locale in LocaleData.available_locales(kind):
            try:
                table = LocaleData.load_table(kind, locale)
            except LocaleDataError as e:
                print(f"FAIL {kind.value}/{locale}: {e.message}")
                return 1
            print(f"ok   {kind.value}/{locale}: {len(table)} entries")
            total += 1
    print(f"{total} tables valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
