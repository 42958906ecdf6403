import icdiff
from prettyprinter import install_extras, pformat

install_extras(["dataclasses"])


def _lines(value):
    # rendered css compares best line by line, with the indentation visible
    if isinstance(value, str):
        return value.replace(" ", "·").splitlines() or [""]
    return pformat(value, indent=4, width=80, sort_dict_keys=True).splitlines()


def pretty_compare(config, op, left, right):
    very_verbose = config.option.verbose >= 2
    if not very_verbose:
        return None

    if op != "==":
        return None

    if isinstance(left, str) and isinstance(right, str) and "\n" not in left + right:
        return None

    try:
        differ = icdiff.ConsoleDiff(cols=160, tabsize=4)
        icdiff_lines = list(
            differ.make_table(_lines(left), _lines(right), context=False)
        )

        return (
            ["equals failed"]
            + ["<left>".center(79) + "|" + "<right>".center(80)]
            + ["-" * 160]
            + [icdiff.color_codes["none"] + l for l in icdiff_lines]
        )
    except Exception:
        return None


def pytest_assertrepr_compare(config, op, left, right):
    return pretty_compare(config, op, left, right)
