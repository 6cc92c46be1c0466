#!/usr/bin/env python3
"""
Normalize clipboard text in place.

Commands (default: c):
  c   auto-detect: <img ...> / ![alt](src) snippets become a before/after
      HTML table, anything else is formatted as a PR title
  t   always format as a PR title
  i   always build an image table
"""
import sys
import argparse
import pyperclip

from images import group_images_by_category, parse_images_from_clipboard
from pr_title import parse_pr_title
from table import generate_table
from notify import ERROR, Notifier, is_running_from_app, paste_result

# ---------------- Config ----------------
MAX_CLIPBOARD_BYTES = 20 * 1024 * 1024   # 20 MB clipboard guard

MODE_IMAGES = "images"
MODE_TITLE = "title"

CMD_MAP = {
    "c": None,
    "t": MODE_TITLE,
    "i": MODE_IMAGES,
}


def detect_mode(text: str) -> str:
    trimmed = text.strip()
    if trimmed.startswith("<img") or trimmed.startswith("!["):
        return MODE_IMAGES
    return MODE_TITLE


def write_clipboard(content: str):
    if len(content.encode("utf-8", errors="replace")) > MAX_CLIPBOARD_BYTES:
        raise ValueError("Result too large for clipboard")
    pyperclip.copy(content)


def convert_title(text: str, notifier: Notifier) -> str | None:
    notifier.progress("Parsing PR title...")
    formatted = parse_pr_title(text)
    if not formatted:
        notifier.dialog("Could not parse PR title. Please check the format.", "Parse Error", ERROR)
        return None

    notifier.progress("Writing formatted title to clipboard...")
    write_clipboard(formatted)
    notifier.dialog(f"Successfully formatted PR title!\n\nResult: {formatted}", "Success")
    return formatted


def convert_images(text: str, notifier: Notifier) -> str | None:
    notifier.progress("Parsing images...")
    images = parse_images_from_clipboard(text)
    if not images:
        notifier.dialog(
            "No valid images found in clipboard content. Make sure your clipboard starts "
            "with <img ...> tags or Markdown images like ![alt](src).",
            "No Images Found",
            ERROR,
        )
        return None

    notifier.progress(f"Found {len(images)} images, grouping by category...")
    standalone, paired = group_images_by_category(images)

    notifier.progress("Generating table...")
    table_html = generate_table(standalone, paired)

    notifier.progress("Writing result to clipboard...")
    write_clipboard(table_html)

    total = len(standalone) + len(paired)
    notifier.dialog(
        f"Successfully converted clipboard content to table format!\n"
        f"Processed {total} categories with {len(images)} images.",
        "Success",
    )
    return table_html


def convert_clipboard(notifier: Notifier, mode=None, paste=True, echo=False) -> int:
    try:
        notifier.progress("Reading clipboard content...")
        content = pyperclip.paste() or ""

        if not content.strip():
            notifier.dialog("Clipboard is empty. Please copy some content first.", "No Content", ERROR)
            return 1

        if mode is None:
            mode = detect_mode(content)

        if mode == MODE_TITLE:
            result = convert_title(content, notifier)
        else:
            result = convert_images(content, notifier)

        if result is None:
            return 1

        if echo:
            print(result)

        if paste and notifier.app_mode:
            paste_result()
        return 0

    except Exception as e:
        notifier.dialog(f"An error occurred: {e}", "Error", ERROR)
        return 1


def main(argv=None):
    p = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("cmd", nargs="?", default="c", choices=sorted(CMD_MAP))
    p.add_argument("--app-mode", action="store_true", help="Use dialogs and paste the result back")
    p.add_argument("--no-paste", action="store_true", help="Do not paste after converting (app mode)")
    p.add_argument("--print", dest="echo", action="store_true", help="Also print the result to stdout")
    p.add_argument("--quiet", action="store_true", help="No progress lines (console mode)")

    args = p.parse_args(argv)

    app_mode = args.app_mode or is_running_from_app([])
    notifier = Notifier(app_mode=app_mode, quiet=args.quiet)
    try:
        return convert_clipboard(
            notifier,
            mode=CMD_MAP[args.cmd],
            paste=not args.no_paste,
            echo=args.echo,
        )
    finally:
        notifier.close()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
