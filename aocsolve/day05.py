"""Day 5: ordering rules for safety manual print jobs."""

from collections import defaultdict
from dataclasses import dataclass, field


@dataclass
class Ordering:
    """Pages that must come before and after a page."""

    pages_before: set = field(default_factory=set)
    pages_after: set = field(default_factory=set)


@dataclass
class PrintData:
    """Ordering rules keyed by page, and the print jobs."""

    rules: dict
    jobs: list


def _parse_rules(block):
    rules = defaultdict(Ordering)
    for line in block.splitlines():
        pages = [int(page) for page in line.split("|")]
        if len(pages) != 2:
            raise ValueError("Invalid input: found invalid rule")
        first, second = pages
        rules[first].pages_after.add(second)
        rules[second].pages_before.add(first)
    return dict(rules)


def _parse_jobs(block):
    return [[int(page) for page in line.split(",")] for line in block.splitlines()]


def parse_input(text):
    """Parse the rule block and the job block."""
    parts = text.replace("\r\n", "\n").split("\n\n")
    if len(parts) != 2:
        raise ValueError("Invalid input: Expected 2 parts")
    rules_block, jobs_block = parts
    return PrintData(rules=_parse_rules(rules_block), jobs=_parse_jobs(jobs_block))


def _is_before(page, other, rules):
    ordering = rules.get(page)
    return ordering is not None and other in ordering.pages_after


def is_job_correct(pages, rules):
    """True if every page is required to precede every later page."""
    return all(
        _is_before(first, second, rules)
        for idx, first in enumerate(pages)
        for second in pages[idx + 1:]
    )


def _merge(left, right, rules):
    merged = []
    left_iter, right_iter = 0, 0
    while left_iter < len(left) or right_iter < len(right):
        take_right = right_iter < len(right) and (
            left_iter >= len(left) or _is_before(right[right_iter], left[left_iter], rules)
        )
        if take_right:
            merged.append(right[right_iter])
            right_iter += 1
        else:
            merged.append(left[left_iter])
            left_iter += 1
    return merged


def correct_job(pages, rules):
    """Return the pages reordered to satisfy the rules."""
    if len(pages) <= 1:
        return list(pages)
    middle = len(pages) // 2
    return _merge(correct_job(pages[:middle], rules), correct_job(pages[middle:], rules), rules)


def part_1(text):
    """Sum of the middle pages of correctly ordered jobs."""
    data = parse_input(text)
    return sum(job[len(job) // 2] for job in data.jobs if is_job_correct(job, data.rules))


def part_2(text):
    """Sum of the middle pages of incorrect jobs after reordering."""
    data = parse_input(text)
    fixed = (correct_job(job, data.rules) for job in data.jobs if not is_job_correct(job, data.rules))
    return sum(job[len(job) // 2] for job in fixed)