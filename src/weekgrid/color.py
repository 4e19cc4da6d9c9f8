# SPDX-License-Identifier: MIT

# Palette for tag types, in assignment order.
# These colors are chosen for good visibility in terminal displays.
PALETTE = [
    "medium_purple1",
    "sky_blue1",
    "pale_green1",
    "light_goldenrod1",
    "light_coral",
    "pink1",
    "slate_blue1",
    "dark_slate_gray2",
    "aquamarine1",
    "sandy_brown",
]

# Used when a tag type has no Tag entry
FALLBACK_TAG_COLOR = "grey70"

DONE_SCHEDULE_COLOR = "bright_black"
OVERLAP_NOTICE_COLOR = "red"
