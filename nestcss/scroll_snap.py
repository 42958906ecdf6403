"""Scroll snap declarations, e.g. rule(".carousel").style(snap_type_x("mandatory"))"""
from functools import partial

from nestcss.helpers import declaration

snap_type = partial(declaration, "scroll-snap-type")
snap_type_x = partial(declaration, "scroll-snap-type", "x")
snap_type_y = partial(declaration, "scroll-snap-type", "y")
snap_type_both = partial(declaration, "scroll-snap-type", "both")
snap_type_block = partial(declaration, "scroll-snap-type", "block")
snap_type_inline = partial(declaration, "scroll-snap-type", "inline")
snap_type_none = partial(declaration, "scroll-snap-type", "none")

# snap_align("start") or snap_align("start", "end") for block then inline
snap_align = partial(declaration, "scroll-snap-align")
snap_align_start = partial(declaration, "scroll-snap-align", "start")
snap_align_center = partial(declaration, "scroll-snap-align", "center")
snap_align_end = partial(declaration, "scroll-snap-align", "end")
snap_align_none = partial(declaration, "scroll-snap-align", "none")

snap_stop = partial(declaration, "scroll-snap-stop")
snap_stop_normal = partial(declaration, "scroll-snap-stop", "normal")
snap_stop_always = partial(declaration, "scroll-snap-stop", "always")

scroll_padding = partial(declaration, "scroll-padding")
scroll_padding_top = partial(declaration, "scroll-padding-top")
scroll_padding_right = partial(declaration, "scroll-padding-right")
scroll_padding_bottom = partial(declaration, "scroll-padding-bottom")
scroll_padding_left = partial(declaration, "scroll-padding-left")
scroll_padding_inline = partial(declaration, "scroll-padding-inline")
scroll_padding_block = partial(declaration, "scroll-padding-block")

scroll_margin = partial(declaration, "scroll-margin")
scroll_margin_top = partial(declaration, "scroll-margin-top")
scroll_margin_right = partial(declaration, "scroll-margin-right")
scroll_margin_bottom = partial(declaration, "scroll-margin-bottom")
scroll_margin_left = partial(declaration, "scroll-margin-left")
scroll_margin_inline = partial(declaration, "scroll-margin-inline")
scroll_margin_block = partial(declaration, "scroll-margin-block")

overscroll_behavior = partial(declaration, "overscroll-behavior")
overscroll_behavior_x = partial(declaration, "overscroll-behavior-x")
overscroll_behavior_y = partial(declaration, "overscroll-behavior-y")
