"""Create the schema and record the registry admin."""
from __future__ import annotations

import argparse
import logging

from ballot_registry.core.config import get_settings
from ballot_registry.db.session import SessionLocal, engine
from ballot_registry.models import Base
from ballot_registry.voting.sql import SqlVotingState

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--admin", default=settings.admin_identity, help="admin identity")
    args = parser.parse_args(argv)

    Base.metadata.create_all(bind=engine)
    with SessionLocal() as session:
        state = SqlVotingState.bootstrap(session, admin_identity=args.admin)
    logger.info("Registry ready; admin is %s", state.admin)


if __name__ == "__main__":
    main()
