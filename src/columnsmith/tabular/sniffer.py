"""Field delimiter detection."""

DELIMITER_CANDIDATES = (",", ";", "\t", "|")
SAMPLE_LINE_COUNT = 5


def detect_delimiter(text: str) -> str:
    """
    Pick the field delimiter for a block of delimited text.

    Counts every candidate across the first few lines and keeps the one with
    the strictly highest total. Ties, including a sample with no candidate at
    all, go to the earliest candidate, so comma is the fallback.

    Args:
        text: Raw decoded file contents

    Returns:
        One of DELIMITER_CANDIDATES
    """
    lines = text.split("\n")[:SAMPLE_LINE_COUNT]

    best_delimiter = DELIMITER_CANDIDATES[0]
    max_count = 0
    for delimiter in DELIMITER_CANDIDATES:
        count = sum(line.count(delimiter) for line in lines)
        if count > max_count:
            max_count = count
            best_delimiter = delimiter

    return best_delimiter
