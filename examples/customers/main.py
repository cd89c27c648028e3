"""Run the customer table examples.

Provides three jobs:
- add_customers.yml   (create one record per item, manual column mapping)
- list_customers.yml  (fetch every record of the table)
- update_status.yml   (update records from raw item data, error tolerant)

Requires BASE_ACCESS_TOKEN in the environment.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from basecrud import run_job_from_yaml


def main() -> None:
    parser = argparse.ArgumentParser(description="Run customer table jobs")
    parser.add_argument(
        "--job",
        choices=["add_customers", "list_customers", "update_status"],
        default="list_customers",
        help="Job to run",
    )
    parser.add_argument("--app-token", required=True, help="App token of the Base")
    parser.add_argument("--table-id", required=True, help="Table ID")
    args = parser.parse_args()

    here = Path(__file__).parent
    items = json.loads((here / "items.json").read_text(encoding="utf-8"))
    if args.job == "list_customers":
        items = [{}]

    results = run_job_from_yaml(
        str(here / "jobs" / f"{args.job}.yml"),
        items,
        cli_vars={"app_token": args.app_token, "table_id": args.table_id},
    )
    print(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
