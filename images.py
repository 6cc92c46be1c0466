import re
from typing import NamedTuple

BEFORE = "before"
AFTER = "after"
STANDALONE = "standalone"

# "1.", "2.", "3 ", "4" at the very start
ORDER_PREFIX_RE = re.compile(r"^([0-9]+)\.?\s*")

# trailing " before" / " after", optionally with a file extension ("before.png")
BEFORE_SUFFIX_RE = re.compile(r"\s+before(?:\.[a-z0-9]+)?\s*$", re.IGNORECASE)
AFTER_SUFFIX_RE = re.compile(r"\s+after(?:\.[a-z0-9]+)?\s*$", re.IGNORECASE)

IMG_TAG_RE = re.compile(r"<img[^>]+>", re.IGNORECASE)
ALT_ATTR_RE = re.compile(r'alt="([^"]+)"', re.IGNORECASE)
SRC_ATTR_RE = re.compile(r'src="([^"]+)"', re.IGNORECASE)


class ImageInfo(NamedTuple):
    alt: str
    src: str
    category: str
    timing: str
    order: int


def parse_filename(filename: str) -> tuple[int, str, str]:
    """
    Split an alt text / filename into (order, timing, formatted_alt).

        "1. Feature_1_before"        -> (1, "before", "Feature 1")
        "2.Feature 25_before"        -> (2, "before", "Feature 25")
        "3 Feature 32"               -> (3, "standalone", "Feature 32")
        "4feature54_after"           -> (4, "after", "feature54")
        "OTFB card after.JPG"        -> (0, "after", "OTFB card")
    """
    order = 0
    m = ORDER_PREFIX_RE.match(filename)
    if m:
        order = int(m.group(1))
        filename = filename[m.end():]

    normalized = filename.replace("_", " ")

    timing = STANDALONE
    content = normalized
    for name, pattern in ((BEFORE, BEFORE_SUFFIX_RE), (AFTER, AFTER_SUFFIX_RE)):
        m = pattern.search(normalized)
        if m:
            timing = name
            content = normalized[:m.start()]
            break

    return order, timing, content.strip()


def _make_image(original_alt: str, src: str) -> ImageInfo:
    order, timing, formatted = parse_filename(original_alt)
    return ImageInfo(
        alt=formatted,
        src=src,
        category=formatted,
        timing=timing,
        order=order,
    )


def _sort_by_order(images):
    # list.sort is stable, so equal orders keep document order
    images.sort(key=lambda image: image.order)
    return images


def parse_images(html_content: str) -> list[ImageInfo]:
    """Extract images from <img ...> tags (double-quoted alt and src only)."""
    images = []

    for tag in IMG_TAG_RE.findall(html_content):
        alt_match = ALT_ATTR_RE.search(tag)
        src_match = SRC_ATTR_RE.search(tag)
        if not alt_match or not src_match:
            continue

        images.append(_make_image(alt_match.group(1), src_match.group(1)))

    return _sort_by_order(images)


def _find_label_end(content: str, start: int) -> int:
    """Index of the first ']' not escaped by a backslash, or -1."""
    i = start
    while i < len(content):
        if content[i] == "]" and content[i - 1] != "\\":
            return i
        i += 1
    return -1


def _read_target(inner: str) -> str:
    inner = inner.strip()
    if inner.startswith("<"):
        close = inner.find(">")
        if close > 1:
            return inner[1:close].strip()
        return ""

    parts = inner.split()
    return parts[0] if parts else ""


def parse_images_markdown(markdown_content: str) -> list[ImageInfo]:
    """
    Extract images from ![label](target) links.

    The target is read with paren-depth tracking so URLs such as
    https://example.com/a_(b).png survive. An optional "title" after the
    first whitespace inside the parens is ignored; <...> targets are unwrapped.
    """
    content = markdown_content
    n = len(content)
    images = []

    index = 0
    while index < n:
        start = content.find("![", index)
        if start == -1:
            break

        label_end = _find_label_end(content, start + 2)
        if label_end == -1:
            break
        original_alt = content[start + 2:label_end]

        cursor = label_end + 1
        while cursor < n and content[cursor].isspace():
            cursor += 1
        if cursor >= n or content[cursor] != "(":
            index = start + 2
            continue

        inner_start = cursor + 1
        depth = 1
        cursor += 1
        while cursor < n and depth > 0:
            ch = content[cursor]
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
            cursor += 1

        if depth != 0:
            index = start + 2
            continue

        src = _read_target(content[inner_start:cursor - 1])
        if original_alt and src:
            images.append(_make_image(original_alt, src))

        index = cursor

    return _sort_by_order(images)


def parse_images_from_clipboard(clipboard_content: str) -> list[ImageInfo]:
    trimmed = clipboard_content.strip()
    if trimmed.startswith("<img"):
        return parse_images(trimmed)
    return parse_images_markdown(trimmed)


def group_images_by_category(images):
    """
    Split images into (standalone, paired).

    standalone keeps the incoming order. paired maps category -> group dict
    {"order": int, "before": ImageInfo, "after": ImageInfo} in first-seen
    order; a group holds the smallest order of its members and may miss
    either slot. A repeated timing for the same category replaces the
    earlier image. paired is not sorted here.
    """
    standalone = []
    paired = {}

    for image in images:
        if image.timing == STANDALONE:
            standalone.append(image)
            continue

        group = paired.get(image.category)
        if group is None:
            group = {"order": image.order}
            paired[image.category] = group

        group[image.timing] = image
        group["order"] = min(group["order"], image.order)

    return standalone, paired


def format_category_title(category: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in category.split("_"))
