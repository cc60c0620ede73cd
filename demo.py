#!/usr/bin/env python3
"""
flinq walkthrough
runs the query operations over a small set of people and logs the results.
"""

import argparse
import json
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from flinq import Q, EmptySequenceError

# configure minimal logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
logger = logging.getLogger(__name__)


@dataclass
class DemoConfig:
    """which sections to run and over what data"""
    sections: List[str] = field(default_factory=list)
    people: List[Dict] = field(default_factory=lambda: [
        {'id': 1, 'name': 'John', 'age': 25},
        {'id': 2, 'name': 'Alice', 'age': 30},
        {'id': 3, 'name': 'Bob', 'age': 22},
        {'id': 4, 'name': 'Sophie', 'age': 22},
        {'id': 5, 'name': 'Sara', 'age': 29},
    ])


def filtering_and_projection(people: List[Dict]) -> None:
    names = (Q(people)
             .where(lambda p: p['age'] > 22)
             .order_by(lambda p: p['age'])
             .select(lambda p: p['name'])
             .get_collection())
    logger.info("names over 22 by age: %s", names)


def aggregation(people: List[Dict]) -> None:
    q = Q(people)
    logger.info("count: %d", q.count())
    logger.info("sum of ages: %d", q.sum(lambda p: p['age']))
    logger.info("min age: %d", q.min(lambda p: p['age'])['age'])
    logger.info("max age: %d", q.max(lambda p: p['age'])['age'])
    logger.info("average age: %.1f", q.average(lambda p: p['age']))
    try:
        Q([]).min(lambda p: p['age'])
    except EmptySequenceError as e:
        logger.info("min over nobody: %s", e)


def quantifiers(people: List[Dict]) -> None:
    q = Q(people)
    logger.info("anyone over 30: %s", q.any(lambda p: p['age'] > 30))
    logger.info("everyone over 20: %s", q.all(lambda p: p['age'] > 20))


def element_access(people: List[Dict]) -> None:
    q = Q(people)
    logger.info("first: %s", json.dumps(q.first_or_default()))
    logger.info("last: %s", json.dumps(q.last_or_default()))
    fallback = {'id': 6, 'name': 'Mostafa', 'age': 31}
    logger.info("single (falls back): %s", json.dumps(q.single_or_default(fallback)))


def set_operations(people: List[Dict]) -> None:
    q = Q(people)
    logger.info("distinct ages: %s", q.select(lambda p: p['age']).distinct().to_list())
    logger.info("union: %s", json.dumps(q.union([{'id': 6, 'name': 'David', 'age': 28}]).to_list()))
    logger.info("intersect: %s", json.dumps(q.intersect([{'id': 2, 'name': 'Alice', 'age': 30}]).to_list()))
    logger.info("except: %s", json.dumps(q.except_([{'id': 4, 'name': 'Sophie', 'age': 22}]).to_list()))


def partitioning(people: List[Dict]) -> None:
    q = Q(people)
    logger.info("take 2: %s", json.dumps(q.take(2).to_list()))
    logger.info("skip 2: %s", json.dumps(q.skip(2).to_list()))
    logger.info("concat: %s", json.dumps(q.concat([{'id': 6, 'name': 'David', 'age': 28}]).to_list()))


def grouping_and_joins(people: List[Dict]) -> None:
    q = Q(people)
    groups = q.group_by(lambda p: p['age'])
    logger.info("by age: %s", {age: [p['name'] for p in members] for age, members in groups.items()})
    pets = [{'owner': 2, 'pet': 'cat'}, {'owner': 5, 'pet': 'dog'}, {'owner': 2, 'pet': 'fish'}]
    rows = q.join(pets, lambda p: p['id'], lambda pet: pet['owner'])
    logger.info("pets: %s", rows.select(lambda r: f"{r.outer['name']} owns a {r.inner['pet']}").to_list())


def conversion(people: List[Dict]) -> None:
    q = Q(people)
    logger.info("as list: %s", json.dumps(q.to_list()))
    logger.info("as dictionary: %s", json.dumps(q.to_dictionary(lambda p: p['id'])))
    logger.info("as dataframe:\n%s", q.to_data_frame())


SECTIONS: Dict[str, Callable[[List[Dict]], None]] = {
    'filter': filtering_and_projection,
    'aggregate': aggregation,
    'quantify': quantifiers,
    'element': element_access,
    'set': set_operations,
    'partition': partitioning,
    'group': grouping_and_joins,
    'convert': conversion,
}


def create_cli_interface() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='walk through the flinq query operations')
    parser.add_argument('--section', action='append', choices=sorted(SECTIONS),
                        help='run only this section (repeatable, default: all)')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    return parser


def run_demo(config: DemoConfig) -> None:
    for name in config.sections or list(SECTIONS):
        logger.info("--- %s ---", name)
        SECTIONS[name](config.people)


def main(argv: Optional[List[str]] = None) -> None:
    args = create_cli_interface().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    run_demo(DemoConfig(sections=args.section or []))


if __name__ == "__main__":
    main()
