"""Greedy word wrap for table cells."""

from prettycli.exceptions import ConfigError


def wrap_text(text, max_width):
    """Wrap *text* into lines of at most *max_width* characters.

    Text whose raw length already fits is returned as a single line.
    Words are packed greedily; a word longer than *max_width* is cut into
    max_width-sized chunks and its tail starts the next line.
    Returns a list with at least one line.
    """
    if max_width < 1:
        raise ConfigError(f"[ERROR] wrap width must be >= 1, got {max_width}.")
    if len(text) <= max_width:
        return [text]

    lines = []
    current = ""
    for word in text.split():
        if len(word) > max_width:
            if current:
                lines.append(current.strip())
            while len(word) > max_width:
                lines.append(word[:max_width])
                word = word[max_width:]
            current = word
            continue
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    # Whitespace-only input has no words.
    return lines or [""]
