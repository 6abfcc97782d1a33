#!/usr/bin/env python3

"""
Command-line interface for inspecting and maintaining the event collection.

This script handles:
- Listing events with the same filters and pagination as the API
- Showing a single event
- Printing statistics per status
- Seeding a SQL database with the bundled events
- Recomputing stored statuses in a SQL database

The repository is chosen from the environment (see .env):
- SUPABASE_URL + SUPABASE_ANON_KEY: Supabase events table
- DATABASE_URL: SQL database
- Neither: bundled mock events (read-only)

For usage information, run:
    python scripts/events.py --help

Common use cases:
    # Upcoming and ongoing events, second page
    python scripts/events.py list --view active --page 2

    # Hackathons mentioning "ai"
    python scripts/events.py list --type Hackathon --search ai

    # Fill a fresh development database
    DATABASE_URL=sqlite:///data/events.db python scripts/events.py seed
"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from event_overview.config.environment import IS_PRODUCTION_ENVIRONMENT  # noqa: E402
from event_overview.config.constants import (  # noqa: E402
    DEFAULT_PAGE_SIZE,
    EVENT_STATUSES,
    EVENT_TYPES,
    KNOWN_VENDORS,
    MAX_PAGE_SIZE,
)
from event_overview.filters import (  # noqa: E402
    SEARCH_DESCRIPTION,
    SEARCH_ORGANIZER,
    EventFilterCriteria,
    filter_events,
    get_active_events_paginated,
    get_event_stats,
    get_historical_events_paginated,
    sort_events_by_start,
)
from event_overview.models.event import Event  # noqa: E402
from event_overview.pagination import paginate  # noqa: E402
from event_overview.repository import RepositoryError  # noqa: E402
from event_overview.repository.sql import SQLEventRepository  # noqa: E402
from event_overview.status import with_computed_status  # noqa: E402
from event_overview.store import MOCK_EVENTS, EventStore, create_event_store  # noqa: E402

logging.basicConfig(
    format='%(message)s' if os.environ.get('LOG_TO_STDOUT') else '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO,
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def load_store() -> EventStore:
    """Build the store, load the cache and refresh it once."""
    store = create_event_store()
    store.hydrate()
    asyncio.run(store.refresh())
    if store.error:
        logger.warning(f"Using stale or bundled events: {store.error}")
    return store


def require_sql_repository(store: EventStore) -> SQLEventRepository:
    repository = store.repository
    if not isinstance(repository, SQLEventRepository):
        logger.error("This command needs a SQL repository. Set DATABASE_URL or EVENT_REPOSITORY=sql.")
        sys.exit(1)
    return repository


def print_event_details(event: Event) -> None:
    """Print every set field of an event."""
    logger.info(event.to_summary_string())
    for name, value in event.to_dict().items():
        if value not in (None, [], ''):
            logger.info(f"  {name}: {value}")


def cmd_list(args: argparse.Namespace) -> None:
    store = load_store()
    criteria = EventFilterCriteria(
        status=args.status,
        event_type=args.type,
        vendor=args.vendor,
        search=args.search,
        search_field=SEARCH_ORGANIZER if args.search_organizer else SEARCH_DESCRIPTION,
    )
    filtered = filter_events(store.events, criteria)

    if args.view == 'active':
        result = get_active_events_paginated(filtered, args.page, args.page_size)
    elif args.view == 'historical':
        result = get_historical_events_paginated(filtered, args.page, args.page_size)
    else:
        result = paginate(sort_events_by_start(filtered), args.page, args.page_size)

    logger.info(f"Page {result.page}/{result.total_pages} ({result.total} events)")
    for event in result.items:
        logger.info(event.to_summary_string())


def cmd_show(args: argparse.Namespace) -> None:
    store = load_store()
    event = store.get_by_id(args.event_id)
    if event is None:
        logger.error(f"Event {args.event_id} not found")
        sys.exit(1)
    print_event_details(event)


def cmd_stats(args: argparse.Namespace) -> None:
    stats = get_event_stats(load_store().events)
    logger.info(f"Total: {stats.total} (active {stats.active}, historical {stats.historical})")
    for status in EVENT_STATUSES:
        logger.info(f"  {status.value}: {stats.by_status.get(status, 0)}")


def cmd_seed(args: argparse.Namespace) -> None:
    if IS_PRODUCTION_ENVIRONMENT and not args.force:
        logger.error("Refusing to seed mock events in production without --force")
        sys.exit(1)
    repository = require_sql_repository(create_event_store())
    try:
        count = repository.save_events(MOCK_EVENTS)
    except RepositoryError as e:
        logger.error(str(e))
        sys.exit(1)
    logger.info(f"Seeded {count} events")


def cmd_recompute(args: argparse.Namespace) -> None:
    repository = require_sql_repository(create_event_store())
    try:
        events = repository.list_events()
        changed = []
        for event in events:
            updated = with_computed_status(event)
            if updated.status != event.status:
                logger.info(f"{event.title}: {event.status.value} -> {updated.status.value}")
                changed.append(updated)
        if changed and not args.dry_run:
            repository.save_events(changed)
    except RepositoryError as e:
        logger.error(str(e))
        sys.exit(1)
    logger.info(f"{len(changed)} of {len(events)} statuses changed{' (dry run)' if args.dry_run else ''}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Inspect and maintain community tech events')
    subparsers = parser.add_subparsers(dest='command', required=True)

    list_parser = subparsers.add_parser('list', help='List events')
    list_parser.add_argument('--view', choices=['all', 'active', 'historical'], default='all')
    list_parser.add_argument('--status', choices=[s.value for s in EVENT_STATUSES])
    list_parser.add_argument('--type', choices=[t.value for t in EVENT_TYPES])
    list_parser.add_argument('--vendor', help=f"One of {', '.join(v.value for v in KNOWN_VENDORS)} or a free-text vendor name")
    list_parser.add_argument('--search', help='Text to search in title, description and tags')
    list_parser.add_argument('--search-organizer', action='store_true',
                             help='Search organizer name instead of description')
    list_parser.add_argument('--page', type=int, default=1)
    list_parser.add_argument('--page-size', type=int, default=DEFAULT_PAGE_SIZE,
                             choices=range(1, MAX_PAGE_SIZE + 1), metavar=f"[1-{MAX_PAGE_SIZE}]")
    list_parser.set_defaults(func=cmd_list)

    show_parser = subparsers.add_parser('show', help='Show one event')
    show_parser.add_argument('event_id')
    show_parser.set_defaults(func=cmd_show)

    stats_parser = subparsers.add_parser('stats', help='Count events per status')
    stats_parser.set_defaults(func=cmd_stats)

    seed_parser = subparsers.add_parser('seed', help='Insert the bundled events into the SQL database')
    seed_parser.add_argument('--force', action='store_true', help='Allow seeding in production')
    seed_parser.set_defaults(func=cmd_seed)

    recompute_parser = subparsers.add_parser('recompute', help='Recompute stored statuses in the SQL database')
    recompute_parser.add_argument('--dry-run', action='store_true', help='Only report status changes')
    recompute_parser.set_defaults(func=cmd_recompute)

    return parser


def main():
    args = build_parser().parse_args()
    args.func(args)


if __name__ == '__main__':
    main()
