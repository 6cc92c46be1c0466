import re

NO_TICKET = "[no-ticket]"

# MB-95-preferred-times/remove-minimum-constraint-on-start-date
SLASH_SLUG_RE = re.compile(r"^([A-Za-z]+)-(\d+)(?:-[^/]+)?/(.+)$")
# MB-95-remove-minimum-constraint
HYPHEN_SLUG_RE = re.compile(r"^([A-Za-z]+)-(\d+)-(.+)$")
SLUG_SEPARATORS_RE = re.compile(r"[_-]+")
PART_NUMBER_RE = re.compile(r"^[0-9]+$")


def _split_words(text: str) -> list[str]:
    m = SLASH_SLUG_RE.match(text) or HYPHEN_SLUG_RE.match(text)
    if not m:
        return text.split()

    prefix, number, slug = m.groups()
    return [prefix, number] + SLUG_SEPARATORS_RE.sub(" ", slug).split()


def _ticket_id(words: list[str]) -> tuple[str, list[str]]:
    first = words[0].lower()
    second = words[1].lower() if len(words) > 1 else ""

    if first == "no" and second == "ticket":
        return NO_TICKET, words[2:]
    if first == "noticket":
        return NO_TICKET, words[1:]
    if len(words) >= 2:
        return f"[{words[0].upper()}-{words[1].upper()}]", words[2:]
    return f"[{words[0].upper()}]", []


def _pop_last_part(words: list[str]) -> tuple[str, list[str]]:
    # rightmost "part N" wins
    for i in range(len(words) - 2, -1, -1):
        if words[i].lower() == "part" and PART_NUMBER_RE.match(words[i + 1]):
            return f"[PART-{words[i + 1]}]", words[:i] + words[i + 2:]
    return "", words


def parse_pr_title(title: str) -> str:
    """
    Format a PR title draft as "[TICKET] [PART-N] Feature name".

        "Mb 80 group by parking lot"     -> "[MB-80] Group by parking lot"
        "Saas 1234 feature name part 1"  -> "[SAAS-1234] [PART-1] Feature name"
        "no ticket feature name"         -> "[no-ticket] Feature name"
        "Noticket feature name"          -> "[no-ticket] Feature name"
        "MB 123"                         -> "[MB-123]"
        "MB-95-times/remove-min-date"    -> "[MB-95] Remove min date"

    Returns "" when there is nothing to parse.
    """
    words = _split_words(title.strip())
    if not words:
        return ""

    ticket_id, remaining = _ticket_id(words)
    if not remaining:
        return ticket_id

    part_suffix, feature_words = _pop_last_part(remaining)
    if not feature_words:
        return f"{ticket_id} {part_suffix}"

    feature = " ".join(feature_words)
    feature = feature[:1].upper() + feature[1:]

    if part_suffix:
        return f"{ticket_id} {part_suffix} {feature}"
    return f"{ticket_id} {feature}"
