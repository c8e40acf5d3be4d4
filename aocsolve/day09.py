"""Day 9: compacting an amphipod's disk map."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Block:
    """A run of disk blocks: a file when file_id is set, free space otherwise."""

    file_id: Optional[int]
    size: int

    @property
    def is_space(self):
        """True if this run is free space."""
        return self.file_id is None


def _disk_digits(text):
    lines = text.splitlines()
    if len(lines) != 1:
        raise ValueError("Input must be only 1 line")
    (line,) = lines
    for char in line:
        if not ("0" <= char <= "9"):
            raise ValueError(f"Not a number: {char!r}")
    return [int(char) for char in line]


def _file_id_for(idx):
    return idx // 2 if idx % 2 == 0 else None


def parse_spans(text):
    """Return the disk map as alternating file and space runs."""
    return [Block(_file_id_for(idx), size) for idx, size in enumerate(_disk_digits(text))]


def parse_blocks(text):
    """Return one entry per disk block: the file id, or None for free space."""
    return [span.file_id for span in parse_spans(text) for _ in range(span.size)]


def _last_file_index(blocks, start):
    for idx in range(start, -1, -1):
        if blocks[idx] is not None:
            return idx
    return None


def compact_blocks(blocks):
    """Move single file blocks from the end into the leftmost free blocks."""
    blocks = list(blocks)
    right = len(blocks) - 1
    for left, block in enumerate(blocks):
        if block is not None:
            continue
        idx = _last_file_index(blocks, right)
        if idx is None:
            continue
        right = idx
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], None
    return blocks


def compact_files(spans):
    """Move whole files, highest id first, into the leftmost space that fits."""
    spans = list(spans)
    for file_id in range(len(spans) // 2, -1, -1):
        file_idx = next(
            (idx for idx in range(len(spans) - 1, -1, -1) if spans[idx].file_id == file_id),
            None,
        )
        if file_idx is None:
            break
        file_block = spans[file_idx]
        space_idx = next(
            (
                idx
                for idx, span in enumerate(spans[:file_idx])
                if span.is_space and span.size >= file_block.size
            ),
            None,
        )
        if space_idx is None:
            continue
        space_block = spans[space_idx]
        spans[space_idx] = file_block
        spans[file_idx] = Block(None, file_block.size)
        if space_block.size > file_block.size:
            spans.insert(space_idx + 1, Block(None, space_block.size - file_block.size))
    return spans


def _checksum(blocks):
    return sum(idx * file_id for idx, file_id in enumerate(blocks) if file_id is not None)


def part_1(text):
    """Checksum after moving single blocks."""
    return _checksum(compact_blocks(parse_blocks(text)))


def part_2(text):
    """Checksum after moving whole files."""
    spans = compact_files(parse_spans(text))
    return _checksum(span.file_id for span in spans for _ in range(span.size))