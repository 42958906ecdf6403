from nestcss import Style, style


def test_render():
    assert style(font_weight="bold", color="red").render() == "font-weight: bold; color: red;"


def test_to_rule():
    assert style(color="red").to_rule("a") == "a { color: red; }"


def test_reset_keeps_position():
    s = Style().prop("color", "red").prop("margin", 0).prop("color", "blue")
    assert s.to_dict() == {"color": "blue", "margin": "0"}
    assert str(s) == "color: blue; margin: 0;"


def test_empty():
    assert Style().render() == ""
    assert not Style()
    assert style(color="red")
