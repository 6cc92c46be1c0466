from images import format_category_title

# ---------------- Config ----------------
IMAGE_WIDTH = 400
SUMMARY_TEXT = "Click to expand..."


def _img_cell(image) -> str:
    if image is None:
        return "    <td></td>\n"
    return f'    <td><img src="{image.src}" alt="{image.alt}" width="{IMAGE_WIDTH}"></td>\n'


def _standalone_rows(standalone) -> str:
    s = ""
    for i in range(0, len(standalone), 2):
        pair = standalone[i:i + 2]
        first = pair[0]
        second = pair[1] if len(pair) > 1 else None

        s += "  <tr>\n"
        s += f"    <th>{format_category_title(first.category)}</th>\n"
        if second is not None:
            s += f"    <th>{format_category_title(second.category)}</th>\n"
        else:
            s += "    <th></th>\n"
        s += "  </tr>\n"

        s += "  <tr>\n"
        s += _img_cell(first)
        s += _img_cell(second)
        s += "  </tr>\n"
    return s


def _paired_rows(paired) -> str:
    s = ""
    # sorted() is stable: groups sharing an order stay in first-seen order
    for category, group in sorted(paired.items(), key=lambda kv: kv[1]["order"]):
        s += "  <tr>\n"
        s += f'    <th colspan="2">{format_category_title(category)}</th>\n'
        s += "  </tr>\n"

        s += "  <tr>\n"
        s += "    <th>Before</th>\n"
        s += "    <th>After</th>\n"
        s += "  </tr>\n"

        s += "  <tr>\n"
        s += _img_cell(group.get("before"))
        s += _img_cell(group.get("after"))
        s += "  </tr>\n"
    return s


def generate_table(standalone, paired) -> str:
    """
    Render grouped images as a collapsible HTML table.

    Standalone images come first, two per row; before/after groups follow,
    sorted by group order.
    """
    s = f"<details><summary>{SUMMARY_TEXT}</summary>\n<table>\n"
    s += _standalone_rows(standalone)
    s += _paired_rows(paired)
    s += "</table></details>"
    return s
