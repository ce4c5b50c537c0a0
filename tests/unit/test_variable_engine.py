from arnkit.core import variable_engine


def test_find_variables_in_order():
    text = "home/${aws:username}/${env}/${aws:username}"
    assert variable_engine.find_variables(text) == ["aws:username", "env", "aws:username"]


def test_has_variables_needs_a_name():
    assert variable_engine.has_variables("a/${x}")
    assert not variable_engine.has_variables("a/${}")
    assert not variable_engine.has_variables("a/$x")
    assert not variable_engine.has_variables("a/{x}")


def test_substitute_keeps_unknown():
    out = variable_engine.substitute("${greeting} ${name}!", {"name": "Simon"})
    assert out == "${greeting} Simon!"


def test_substitute_all_occurrences():
    out = variable_engine.substitute("${a}-${a}-${b}", {"a": "1", "b": "2"})
    assert out == "1-1-2"


def test_substitute_does_not_recurse():
    out = variable_engine.substitute("${a}", {"a": "${b}", "b": "x"})
    assert out == "${b}"
