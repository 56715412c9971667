"""Utility script to populate demo data for local environments."""

from creativahub.db import init_db
from creativahub.logging_config import setup_logging
from creativahub.seed import ensure_demo_data


def main() -> None:
	"""Initialise the database schema and load deterministic demo data."""
	setup_logging()
	init_db()
	ensure_demo_data()


if __name__ == "__main__":
	main()
