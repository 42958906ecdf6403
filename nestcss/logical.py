"""Logical (writing-mode relative) property declarations.

The two-value forms take start then end, e.g. margin_inline("1rem", "2rem").
"""
from functools import partial

from nestcss.helpers import declaration

inline_size = partial(declaration, "inline-size")
block_size = partial(declaration, "block-size")
min_inline_size = partial(declaration, "min-inline-size")
max_inline_size = partial(declaration, "max-inline-size")
min_block_size = partial(declaration, "min-block-size")
max_block_size = partial(declaration, "max-block-size")

margin_inline = partial(declaration, "margin-inline")
margin_block = partial(declaration, "margin-block")
margin_inline_start = partial(declaration, "margin-inline-start")
margin_inline_end = partial(declaration, "margin-inline-end")
margin_block_start = partial(declaration, "margin-block-start")
margin_block_end = partial(declaration, "margin-block-end")

padding_inline = partial(declaration, "padding-inline")
padding_block = partial(declaration, "padding-block")
padding_inline_start = partial(declaration, "padding-inline-start")
padding_inline_end = partial(declaration, "padding-inline-end")
padding_block_start = partial(declaration, "padding-block-start")
padding_block_end = partial(declaration, "padding-block-end")

inset_inline = partial(declaration, "inset-inline")
inset_block = partial(declaration, "inset-block")
inset_inline_start = partial(declaration, "inset-inline-start")
inset_inline_end = partial(declaration, "inset-inline-end")
inset_block_start = partial(declaration, "inset-block-start")
inset_block_end = partial(declaration, "inset-block-end")

border_inline = partial(declaration, "border-inline")
border_block = partial(declaration, "border-block")
border_inline_start = partial(declaration, "border-inline-start")
border_inline_end = partial(declaration, "border-inline-end")
border_block_start = partial(declaration, "border-block-start")
border_block_end = partial(declaration, "border-block-end")
border_start_start_radius = partial(declaration, "border-start-start-radius")
border_start_end_radius = partial(declaration, "border-start-end-radius")
border_end_start_radius = partial(declaration, "border-end-start-radius")
border_end_end_radius = partial(declaration, "border-end-end-radius")

text_align = partial(declaration, "text-align")
text_align_start = partial(declaration, "text-align", "start")
text_align_end = partial(declaration, "text-align", "end")
float_inline_start = partial(declaration, "float", "inline-start")
float_inline_end = partial(declaration, "float", "inline-end")
clear_inline_start = partial(declaration, "clear", "inline-start")
clear_inline_end = partial(declaration, "clear", "inline-end")

overflow_inline = partial(declaration, "overflow-inline")
overflow_block = partial(declaration, "overflow-block")
resize_block = partial(declaration, "resize", "block")
resize_inline = partial(declaration, "resize", "inline")
